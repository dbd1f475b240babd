import time
import numpy as np
import cachematrix


def benchmark_cache_solve(n, iterations=5):
    print(f"\n--- Benchmarking cache_solve (N={n}) ---")

    # Diagonally dominant so it is invertible
    a_np = np.random.rand(n, n) + np.eye(n) * n
    cell = cachematrix.CacheCell(a_np)

    start = time.perf_counter()
    cachematrix.cache_solve(cell)
    miss_time = time.perf_counter() - start
    print(f"Miss (solve):   {miss_time:.6f} s")

    start = time.perf_counter()
    for _ in range(iterations):
        cachematrix.cache_solve(cell)
    end = time.perf_counter()
    hit_time = (end - start) / iterations
    print(f"Hit (cached):   {hit_time:.6f} s")

    start = time.perf_counter()
    for _ in range(iterations):
        np.linalg.inv(a_np)
    end = time.perf_counter()
    np_time = (end - start) / iterations
    print(f"NumPy inv:      {np_time:.6f} s")

    speedup = np_time / hit_time if hit_time > 0 else 0
    print(f"Speedup (hit vs inv): {speedup:.0f}x")


if __name__ == "__main__":
    for n in (100, 500, 1000):
        benchmark_cache_solve(n)
