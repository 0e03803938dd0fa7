import matplotlib.pyplot as plt
import numpy as np
from fourier_transforms.backends import get_backend


class SpectrumVisualizer:
    def __init__(self, backend="radix", size=360, sample_rate=360.0):
        self.backend = get_backend(backend)
        self.backend_name = self.backend.name
        self.size = size
        self.sample_rate = sample_rate

        self.signal = self._make_signal()
        self.spectrum = self.backend.fft(self.signal)
        self.freqs = self.backend.fftfreq(size, 1.0 / sample_rate)
        self.round_trip_error = self.backend.abs(self.backend.ifft(self.spectrum) - self.signal)

        self.fig, (self.ax1, self.ax2, self.ax3) = plt.subplots(1, 3, figsize=(15, 4))
        self._setup_plots()

    def _make_signal(self):
        """Two tones plus a little noise"""
        t = np.arange(self.size) / self.sample_rate
        rng = np.random.default_rng(0)
        tones = np.exp(2j * np.pi * 30.0 * t) + 0.5 * np.exp(2j * np.pi * -72.0 * t)
        noise = 0.05 * (rng.standard_normal(self.size) + 1j * rng.standard_normal(self.size))
        return tones + noise

    def _setup_plots(self):
        self.ax1.plot(np.arange(self.size) / self.sample_rate, self.signal.real)
        self.ax1.set_title("Signal Re(x)")
        self.ax1.set_xlabel("Time [s]")

        order = np.argsort(self.freqs)
        self.ax2.plot(self.freqs[order], self.backend.abs(self.spectrum)[order])
        self.ax2.set_title(f"|X| ({self.backend_name} backend, N={self.size})")
        self.ax2.set_xlabel("Frequency [Hz]")

        self.ax3.semilogy(self.round_trip_error + 1e-20)
        self.ax3.set_title(f"|ifft(fft(x)) - x|, max {np.max(self.round_trip_error):.1e}")
        self.ax3.set_xlabel("Sample")

    def run(self):
        plt.tight_layout()
        plt.show()


if __name__ == "__main__":
    # visualizer = SpectrumVisualizer(backend="radix2", size=256, sample_rate=256.0)

    visualizer = SpectrumVisualizer(
        backend="radix",
        size=360,
        sample_rate=360.0,
    )

    visualizer.run()
