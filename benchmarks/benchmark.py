import random

from pyinstrument import Profiler

from utilkit import add_unique, get_or_put_key, max_by, min_by, remove_all


def make_points(n, seed=0):
    rng = random.Random(seed)
    return [(rng.uniform(-1e3, 1e3), rng.uniform(-1e3, 1e3)) for _ in range(n)]


def benchmark_large():
    points = make_points(200_000)
    print(f"Generated {len(points)} points")

    profiler = Profiler()
    profiler.start()

    N = 10
    print(f"Starting computation ({N} iterations)...")
    for _ in range(N):
        lowest = min_by(points, lambda p: p[1])
        rightmost = max_by(points, lambda p: p[0])

        work = list(points)
        removed = remove_all(work, lambda p: p[0] < 0.0)

        buckets = {}
        for p in points:
            get_or_put_key(buckets, int(p[0] // 100), list).append(p)

        unique = []
        add_unique(unique, *(int(p[0]) % 500 for p in points[:20_000]))
    print("Computation finished.")
    print(f"lowest={lowest} rightmost={rightmost} removed={len(removed)} buckets={len(buckets)}")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("utilkit_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_large()
