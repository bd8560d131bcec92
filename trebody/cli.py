import argparse
import logging

from . import constants as C
from .analysis import EnergyMonitor, system_energy
from .presets import PRESETS
from .simulation import Simulation
from .utils import energy_to_display, mass_to_display, time_to_display

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trebody", description="Three body gravity simulation")
    parser.add_argument("--preset", default="TreBody", help="Initial conditions to load")
    parser.add_argument("--time-step", type=float, help="Seconds per tick")
    parser.add_argument("--ticks-per-frame", type=int, help="Ticks computed between frames")
    parser.add_argument("--g", dest="g_constant", type=float, help="Gravitational constant")
    parser.add_argument(
        "--backend", choices=C.BACKENDS, default=C.CLI_BACKEND, help="Tick implementation"
    )
    parser.add_argument("--headless", action="store_true", help="Print positions instead of opening a window")
    parser.add_argument("--frames", type=int, help="Stop after this many frames")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def run_headless(simulation: Simulation, frames: int, out=print) -> None:
    """Run ``frames`` frames and print each body's position as ``x,y,z``."""
    g_const = simulation.config.g_constant
    monitor = EnergyMonitor()
    monitor.set_initial_energy(simulation.bodies, g_const)
    for body in simulation.bodies:
        logger.info("%s: mass %s", body.name, mass_to_display(body.mass))

    for frame in range(frames):
        simulation.run_frame()
        out(f"# frame {frame + 1} t={simulation.simulation_time:g}")
        for body in simulation.bodies:
            out(str(body.position))
        monitor.update(simulation.bodies, g_const)

    _, _, total = system_energy(simulation.bodies, g_const)
    drift = f"{monitor.history[-1]:.3e} %" if monitor.history else "n/a"
    out(
        f"# {simulation.tick_count} ticks, {time_to_display(simulation.simulation_time)} simulated, "
        f"energy {energy_to_display(total)}, drift {drift}"
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.preset not in PRESETS:
        parser.error(f"unknown preset '{args.preset}' (choose from: {', '.join(PRESETS)})")

    try:
        simulation = Simulation.from_preset(
            args.preset,
            time_step=args.time_step,
            ticks_per_frame=args.ticks_per_frame,
            g_constant=args.g_constant,
            backend=args.backend,
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.headless:
        run_headless(simulation, args.frames if args.frames is not None else 1)
        return 0

    from .rendering import run_viewer

    run_viewer(simulation, max_frames=args.frames)
    return 0
