# main.py
import os
import sys
import time
import logging
import cProfile
import argparse

import pygame

from config import config, ConfigurationError
from physics_utils import clamp
from solarsystem import StarSystem
from texture_export import save_preview

class SystemSimulation:
    """Drives a `StarSystem` headless for a fixed number of ticks.

    Renderers and input live outside this project; this runner only advances
    the bodies, reports where they ended up and optionally dumps each body's
    generated texture so it can be inspected.

    Attributes:
        system (StarSystem): The generated system being advanced.
        tick_count (int): Ticks run so far.
        simulated_seconds (float): Sum of the (clamped) tick lengths.
    """
    def __init__(self, name: str = None, seed: int = None, resolution: int = None):
        """Generates the star system.

        Raises:
            ConfigurationError: If the configuration is inconsistent.
            PhysicsError: If a generated orbit is impossible (a generator defect).
        """
        start = time.perf_counter()
        self.system = StarSystem(name, seed, resolution)
        logging.info(f"Generated {len(self.system.bodies)} bodies in {time.perf_counter() - start:.2f}s.")
        self.tick_count = 0
        self.simulated_seconds = 0.0

    def run(self, ticks: int, dt: float):
        dt_used = clamp(dt, 0.0, config.Simulation.MAX_DELTA_TIME)
        if dt_used != dt:
            logging.warning(f"Tick length {dt}s clamped to {dt_used}s.")
        start = time.perf_counter()
        for _ in range(ticks):
            self.system.update(dt)
            self.tick_count += 1
            self.simulated_seconds += dt_used
        elapsed = time.perf_counter() - start
        logging.info(f"Ran {ticks} ticks ({self.simulated_seconds:.2f}s simulated) in {elapsed:.3f}s.")

    def log_summary(self):
        for body in self.system.bodies:
            x, y = body.position
            parent = f" around {body.parent_name}" if body.parent_name else ""
            logging.info(f"{body.body_type.value:>8} {body.name:<16} pos=({x:10.2f}, {y:10.2f}) "
                         f"rot={body.rotation:7.3f}{parent}")

    def write_previews(self, directory: str):
        os.makedirs(directory, exist_ok=True)
        for body in self.system.bodies:
            filename = body.name.replace(os.sep, '_').replace(' ', '_') + '.png'
            try:
                save_preview(body, os.path.join(directory, filename))
            except (pygame.error, OSError) as e:
                logging.error(f"Failed to write preview for '{body.name}': {e}", exc_info=True)

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate a seeded star system and advance its orbits headless.")
    parser.add_argument("--system", default=config.StarSystem.DEFAULT_NAME,
                        help="System name; also names the central star.")
    parser.add_argument("--seed", type=int, default=config.StarSystem.DEFAULT_SEED,
                        help="Seed for the system layout.")
    parser.add_argument("--ticks", type=int, default=600, help="Number of ticks to simulate.")
    parser.add_argument("--dt", type=float, default=config.Simulation.DEFAULT_TICK_SECONDS,
                        help="Seconds per tick (clamped to the configured maximum).")
    parser.add_argument("--resolution", type=int, default=None,
                        help="Surface grid resolution override.")
    parser.add_argument("--preview-dir", default=None,
                        help="If set, write one PNG texture per body into this directory.")
    parser.add_argument("--profile", action="store_true",
                        help="Enable profiling. Statistics will be saved to 'simulation_profile.prof'.")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)

    profiler = None
    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        logging.info("cProfile profiling enabled. Output will be saved to simulation_profile.prof upon completion.")

    exit_code = 0
    try:
        simulation = SystemSimulation(args.system, args.seed, args.resolution)
        simulation.run(args.ticks, args.dt)
        simulation.log_summary()
        if args.preview_dir:
            simulation.write_previews(args.preview_dir)
    except ConfigurationError as e_config:
        logging.critical(f"Simulation could not start due to a ConfigurationError: {e_config}", exc_info=True)
        print(f"FATAL CONFIGURATION ERROR: {e_config}. Check logs for details.")
        exit_code = 2
    except Exception as e_main:
        logging.critical(f"An unexpected critical error occurred: {e_main}", exc_info=True)
        print(f"FATAL UNEXPECTED ERROR: {e_main}. Check logs for details.")
        exit_code = 1
    finally:
        if profiler:
            profiler.disable()
            stats_file = "simulation_profile.prof"
            try:
                profiler.dump_stats(stats_file)
                logging.info(f"Profiling data successfully saved to {stats_file}")
            except OSError as e_profile_dump:
                logging.error(f"Failed to save profiling data to {stats_file}: {e_profile_dump}", exc_info=True)
        logging.info("Simulation terminated.")
    return exit_code

if __name__ == "__main__":
    sys.exit(main())
