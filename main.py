# main.py

import cProfile
import io
import json
import logging
import pstats
import sys

import numpy as np
import pygame

import constants
import logger_setup
from color_sampler import ColorSampler, load_image, surface_to_pixels
from errors import ImageLoadError
from input_tracker import InputTracker
from layout import LayoutParams, generate_layout
from particle_system import ParticleSystem

# Get the application's dedicated logger
logger = logging.getLogger("particle_rings")


def load_config(path='config.json'):
    """Loads the JSON configuration file."""
    with open(path, 'r') as f:
        return json.load(f)


def build_particle_system(config, rng):
    """
    Loads both source images and lays out the particles.

    Raises ImageLoadError if either image is unavailable; nothing is built
    until both have decoded.
    """
    image_paths = config['images']
    image_a = load_image(image_paths['a'])
    image_b = load_image(image_paths['b'])

    sampler = ColorSampler(surface_to_pixels(image_a), surface_to_pixels(image_b))
    params = LayoutParams.from_config(config.get('layout', {}))
    specs = generate_layout(constants.WIDTH, constants.HEIGHT, sampler, params)

    backdrop = image_a if config.get('display', {}).get('draw_backdrop', True) else None
    return ParticleSystem(specs, rng=rng, physics=config['physics'], backdrop=backdrop)


def run_animation_loop(particle_system, tracker, screen, canvas, clock, run_config):
    """
    The main animation loop. Runs until the window is closed or max_frames
    frames have been rendered.
    """
    max_frames = run_config.get('max_frames')
    log_throttle = run_config.get('log_throttle_frames', 300)

    running = True
    tick = 0
    skipped_frames = 0

    while running and (max_frames is None or tick < max_frames):
        try:
            # Event handling happens between frames on this thread.
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    tracker.resize(event.size)
                else:
                    tracker.handle_event(event)

            if not running:
                break

            particle_system.update_and_draw(canvas)
            if screen.get_size() == canvas.get_size():
                screen.blit(canvas, (0, 0))
            else:
                screen.blit(pygame.transform.smoothscale(canvas, screen.get_size()), (0, 0))
            pygame.display.flip()
        except Exception:
            skipped_frames += 1
            logger.exception(f"Frame {tick} failed; skipping.")

        # --- Logging (throttled) ---
        if tick % log_throttle == 0:
            stats = particle_system.stats()
            logger.debug(
                f"Tick={tick}, "
                f"MeanDisplacement={stats['mean_displacement']:.2f}, "
                f"MaxScale={stats['max_scale']:.2f}, "
                f"CursorActive={stats['cursor_active']}, "
                f"FPS={clock.get_fps():.1f}"
            )

        clock.tick(constants.FPS)
        tick += 1

    logger.info(f"Animation loop finished after {tick} frames ({skipped_frames} skipped).")
    return tick


def main():
    """
    Main function to load the assets and run the animation.
    """
    # Logging is not set up yet, so a config failure is printed.
    try:
        config = load_config('config.json')
    except (OSError, json.JSONDecodeError) as e:
        print(f"FATAL: Could not load config.json. Error: {e}")
        return 1

    logger_setup.setup_logging(config)

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    pygame.init()
    try:
        particle_system = build_particle_system(config, rng)
    except ImageLoadError as e:
        logger.error(
            f"Startup aborted: {e}. Place the source images at the paths under "
            f"'images' in config.json (defaults: images/visage.png, images/test.png)."
        )
        pygame.quit()
        return 1

    display_config = config.get('display', {})
    window_size = tuple(display_config.get('window_size', (constants.WIDTH, constants.HEIGHT)))
    screen = pygame.display.set_mode(window_size, pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    canvas = pygame.Surface((constants.WIDTH, constants.HEIGHT))
    if particle_system.backdrop is not None:
        particle_system.backdrop = particle_system.backdrop.convert()

    tracker = InputTracker(particle_system.cursor, (constants.WIDTH, constants.HEIGHT), screen.get_size())

    run_config = config.get('run_control', {})
    if run_config.get('profile', False):
        profiler = cProfile.Profile()
        profiler.enable()
        run_animation_loop(particle_system, tracker, screen, canvas, clock, run_config)
        profiler.disable()

        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logger.info(f"Profiling complete.\n{s.getvalue()}")
    else:
        run_animation_loop(particle_system, tracker, screen, canvas, clock, run_config)

    logger.info("Application shutting down.")
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
