"""Interactive viewer: moves the player with the keyboard and shows the rendered world."""

from __future__ import annotations

import argparse
import enum
import os
import time
from collections.abc import Iterable

from .geometry import Angle3, Vec3
from .render import Frame, render_frame
from .vxl import load_map
from .world import Blockworld

MOVE_SPEED = 0.3
TURN_SPEED = 3.0


class Action(enum.Enum):
    """Things the player can ask for from the keyboard."""

    QUIT = enum.auto()
    STRAFE_LEFT = enum.auto()
    BACKWARD = enum.auto()
    STRAFE_RIGHT = enum.auto()
    FORWARD = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LOOK_UP = enum.auto()
    LOOK_DOWN = enum.auto()
    TURN_LEFT = enum.auto()
    TURN_RIGHT = enum.auto()
    NEXT_MAP = enum.auto()


_LEFT_TO_CALLER = frozenset({Action.QUIT, Action.NEXT_MAP})


def handle_inputs(pressed: Iterable[Action], world: Blockworld) -> frozenset[Action]:
    """Apply movement and view changes; return the actions the caller must handle."""
    pressed = frozenset(pressed)
    pos = world.player_pos
    direction = world.player_dir

    if Action.STRAFE_LEFT in pressed:
        pos = pos + direction.reset_theta().rotate_phi(-90).to_cartesian(MOVE_SPEED)
    if Action.BACKWARD in pressed:
        pos = pos - direction.to_cartesian(MOVE_SPEED)
    if Action.STRAFE_RIGHT in pressed:
        pos = pos + direction.reset_theta().rotate_phi(90).to_cartesian(MOVE_SPEED)
    if Action.FORWARD in pressed:
        pos = pos + direction.to_cartesian(MOVE_SPEED)
    if Action.UP in pressed:
        pos = Vec3(pos.x, pos.y, pos.z + MOVE_SPEED)
    if Action.DOWN in pressed:
        pos = Vec3(pos.x, pos.y, pos.z - MOVE_SPEED)
    if Action.LOOK_UP in pressed:
        direction = Angle3(direction.theta + TURN_SPEED, direction.phi).clamp_to_view()
    if Action.LOOK_DOWN in pressed:
        direction = Angle3(direction.theta - TURN_SPEED, direction.phi).clamp_to_view()
    if Action.TURN_LEFT in pressed:
        direction = direction.rotate_phi(-TURN_SPEED)
    if Action.TURN_RIGHT in pressed:
        direction = direction.rotate_phi(TURN_SPEED)

    world.player_pos = pos
    world.player_dir = direction
    return pressed & _LEFT_TO_CALLER


def cycle_map(directory: str | os.PathLike[str], index: int, world: Blockworld) -> int:
    """Load the map after ``index`` among the ``.vxl`` files in ``directory``."""
    names = sorted(name for name in os.listdir(directory) if name.endswith(".vxl"))
    if not names:
        raise FileNotFoundError(f"no .vxl maps in {os.fspath(directory)}")
    index = (index + 1) % len(names)
    print("loading map", names[index])
    load_map(os.path.join(directory, names[index]), world)
    return index


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="voxelcast", description="Fly through a VXL voxel map.")
    parser.add_argument("--maps-dir", default="./maps", help="directory holding .vxl maps")
    parser.add_argument("--map", default="DragonsReach.vxl", help="map to load first")
    parser.add_argument("--width", type=int, default=640, help="window width in pixels")
    parser.add_argument("--height", type=int, default=480, help="window height in pixels")
    parser.add_argument("--scale", type=int, default=8, help="window pixels per rendered pixel")
    args = parser.parse_args(argv)
    if args.scale <= 0:
        parser.error("--scale must be positive")
    if args.width < args.scale or args.height < args.scale:
        parser.error("window must be at least one rendered pixel in each direction")
    return args


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    # Imported here so the rest of the package works without a display.
    import pygame

    held_keys = {
        pygame.K_a: Action.STRAFE_LEFT,
        pygame.K_s: Action.BACKWARD,
        pygame.K_d: Action.STRAFE_RIGHT,
        pygame.K_w: Action.FORWARD,
        pygame.K_q: Action.UP,
        pygame.K_e: Action.DOWN,
        pygame.K_UP: Action.LOOK_UP,
        pygame.K_DOWN: Action.LOOK_DOWN,
        pygame.K_LEFT: Action.TURN_LEFT,
        pygame.K_RIGHT: Action.TURN_RIGHT,
    }
    pressed_keys = {pygame.K_ESCAPE: Action.QUIT, pygame.K_n: Action.NEXT_MAP}

    width, height = args.width // args.scale, args.height // args.scale
    frame = Frame(width, height)
    print("frame size", (width, height))

    world = Blockworld()
    load_map(os.path.join(args.maps_dir, args.map), world)
    world.player_pos = Vec3(190, 310, 33)
    world.player_dir = Angle3(95, 325)
    map_index = 0

    pygame.init()
    try:
        screen = pygame.display.set_mode((width * args.scale, height * args.scale))
        pygame.display.set_caption("voxelcast")
        clock = pygame.time.Clock()
        frame_count = 0
        last_frame = time.perf_counter()

        while True:
            actions: set[Action] = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    actions.add(Action.QUIT)
                elif event.type == pygame.KEYDOWN and event.key in pressed_keys:
                    actions.add(pressed_keys[event.key])
            keys = pygame.key.get_pressed()
            actions.update(action for key, action in held_keys.items() if keys[key])

            remaining = handle_inputs(actions, world)
            if Action.QUIT in remaining:
                break
            if Action.NEXT_MAP in remaining:
                map_index = cycle_map(args.maps_dir, map_index, world)

            render_frame(frame, world)
            surface = pygame.image.frombuffer(frame.to_bytes(), (width, height), "RGBX")
            # Row 0 of the frame is the bottom of the view.
            surface = pygame.transform.flip(surface, False, True)
            screen.blit(pygame.transform.scale(surface, screen.get_size()), (0, 0))
            pygame.display.flip()
            clock.tick(60)

            frame_count += 1
            took = time.perf_counter() - last_frame
            if frame_count % 60 == 0 and took > 0:
                print("Frametime", f"{took * 1000:.3f}ms", "FPS", 1 / took)
                print("PlayerPos", world.player_pos, "PlayerDir", world.player_dir)
            last_frame = time.perf_counter()
    finally:
        pygame.quit()
    return 0