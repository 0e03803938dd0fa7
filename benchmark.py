import time
import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import os

matplotlib.use("Agg")  # Use non-interactive backend
from fourier_transforms.backends import get_backend
from fourier_transforms.errors import PreconditionError


def benchmark_backend(backend_name, size=64, repeats=20, seed=0):
    print(f"\nBenchmarking {backend_name} backend...")
    print(f"Length: {size}, Repeats: {repeats}")

    backend = get_backend(backend_name)
    rng = np.random.default_rng(seed)
    x = rng.standard_normal(size) + 1j * rng.standard_normal(size)
    reference = np.fft.fft(x)

    # First call outside the timing loop also checks the result
    try:
        X = backend.fft(x)
    except PreconditionError as e:
        print(f"  Skipped: {e}")
        return None
    max_error = float(np.max(np.abs(X - reference))) if size else 0.0

    start_time = time.perf_counter()
    for i in range(repeats):
        backend.fft(x)
        if (i + 1) % 10 == 0:
            print(f"  Run {i + 1}/{repeats}")
    elapsed = time.perf_counter() - start_time

    transforms_per_second = repeats / elapsed

    print(f"Results for {backend.name}:")
    print(f"  Total time: {elapsed:.3f}s")
    print(f"  Transforms per second: {transforms_per_second:.1f}")
    print(f"  Max abs error vs numpy: {max_error:.2e}")

    return {
        "backend": backend.name,
        "elapsed": elapsed,
        "transforms_per_second": transforms_per_second,
        "max_error": max_error,
    }


def create_performance_dataframe(backends, sizes, repeats=20):
    df = pd.DataFrame(index=backends, columns=sizes, dtype=float)

    for backend in backends:
        for size in sizes:
            result = benchmark_backend(backend, size=size, repeats=repeats)
            if result is not None:
                df.loc[backend, size] = result["transforms_per_second"]

    return df


def print_performance_summary(df):
    print(f"\n{'='*20} PERFORMANCE SUMMARY {'='*20}")

    for size in df.columns:
        print(f"\nLength {size}:")
        print(f"{'Backend':<10} {'FFTs/sec':<12} {'Speedup':<8}")
        print("-" * 35)

        numpy_tps = df.loc["numpy", size]
        size_data = df[size].sort_values(ascending=False, na_position="last")

        for backend in size_data.index:
            tps = size_data[backend]

            if np.isnan(tps):
                print(f"{backend:<10} {'n/a':<12} {'-':<8}")
                continue
            if backend == "numpy":
                speedup = "baseline"
            else:
                speedup = f"{tps/numpy_tps:.3f}x"

            print(f"{backend:<10} {tps:<12.1f} {speedup:<8}")


def save_results_to_csv(df, output_dir="results"):
    os.makedirs(output_dir, exist_ok=True)
    csv_path = os.path.join(output_dir, "table_of_results.csv")

    # Sort by performance on largest size (descending)
    largest_size = df.columns[-1]
    df.sort_values(by=largest_size, ascending=False, na_position="last").round(1).to_csv(csv_path, index_label="Method")

    print(f"Results saved to {csv_path}")
    return csv_path


def create_performance_plots(df, output_dir="results"):
    print(f"\n{'='*20} GENERATING PLOTS {'='*20}")

    os.makedirs(output_dir, exist_ok=True)

    plt.figure(figsize=(12, 8))
    colors = ["blue", "orange", "green", "red", "purple", "brown"]
    markers = ["o", "s", "^", "D", "x", "*", "P"]

    for i, backend in enumerate(df.index):
        plt.plot(
            np.log(df.columns.astype(float)),
            df.loc[backend].values,
            marker=markers[i % len(markers)],
            color=colors[i % len(colors)],
            linewidth=2,
            markersize=8,
            label=backend,
        )

    plt.xlabel("Transform length N", fontsize=12)
    plt.ylabel("Transforms per second", fontsize=12)
    plt.title(
        "Performance comparison: transform length vs transforms per second",
        fontsize=14,
        fontweight="bold",
    )
    plt.legend(fontsize=10)
    plt.grid(True, alpha=0.3)
    plt.xticks(np.log(df.columns.astype(float)), [str(s) for s in df.columns])
    plt.yscale("log")
    plt.tight_layout()
    plot_path = os.path.join(output_dir, "transforms_per_second.png")
    plt.savefig(plot_path, dpi=300, bbox_inches="tight")
    plt.close()

    return plot_path


if __name__ == "__main__":
    backends = ["numpy", "radix", "radix2", "direct"]
    # Powers of two, composites, and primes (the last two skip radix2)
    sizes = [16, 30, 64, 97, 256, 360, 1009, 1024]
    repeats = 20

    df = create_performance_dataframe(backends, sizes, repeats)

    print_performance_summary(df)

    save_results_to_csv(df)

    create_performance_plots(df)

    print(f"\n{'='*20} BENCHMARK COMPLETE {'='*20}")
    print("All results saved to results/ directory")
