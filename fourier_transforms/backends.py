import logging
from fourier_transforms.direct_backend import DirectBackend
from fourier_transforms.numpy_backend import NumpyBackend
from fourier_transforms.radix2_backend import Radix2Backend
from fourier_transforms.radix_backend import RadixBackend

logger = logging.getLogger(__name__)

backends = {
    "numpy": NumpyBackend,
    "radix": RadixBackend,
    "radix2": Radix2Backend,
    "direct": DirectBackend,
}


def get_backend(name, **kwargs):
    try:
        backend_cls = backends[name]
    except KeyError:
        raise ValueError(f"Unknown backend: {name}. Available: {', '.join(sorted(backends))}") from None
    logger.debug("Using %s backend", name)
    return backend_cls(**kwargs)
