from setuptools import setup

setup(
    name="fourier_transforms",
    version="1.0",
    description="Mixed-radix Cooley-Tukey FFT for sequences of any length",
    packages=["fourier_transforms"],
    python_requires=">=3.9",
    install_requires=["numpy", "sympy"],
    extras_require={
        "scripts": ["matplotlib", "pandas"],
        "test": ["pytest"],
    },
    zip_safe=False,
)
