import time

import numpy as np

from trebody.simulation import Simulation

TICKS = 20000


def _time_backend(backend):
    sim = Simulation.from_preset("TreBody", backend=backend)
    t0 = time.time()
    sim.run(TICKS)
    return time.time() - t0, np.array(sim.positions())


if __name__ == "__main__":
    # warm up JIT
    Simulation.from_preset("TreBody", backend="numba").run(1)

    results = {name: _time_backend(name) for name in ("vector", "numpy", "numba")}
    baseline = results["vector"][1]
    for name, (elapsed, positions) in results.items():
        assert np.allclose(positions, baseline, rtol=1e-9)
        print(f"{name:<7}: {elapsed:.3f}s for {TICKS} ticks")
    vector_time, numba_time = results["vector"][0], results["numba"][0]
    if numba_time > 0:
        print(f"Speedup : {vector_time / numba_time:.1f}x")
