"""Built-ins that narrate long-running work with boxed progress bars."""

from __future__ import annotations

from typing import Optional, Sequence

from .context import CallContext
from .devices import _atof, _atoi, _float32, _s, _wrap_int32, label

Args = Sequence[Optional[str]]

BAR_WIDTH = 62
CHUNK_SIZE = 32

# Stages near the end are drawn fuller than a straight proportion.
_FILL_OVERRIDES = {95: 60, 100: BAR_WIDTH}

_ANIMATION_FRAMES = ("   ", ".  ", ".. ", "...")


def progress_bar(percent: int) -> tuple[str, str, str]:
    """The three lines of a boxed progress bar at ``percent`` complete."""
    if percent in _FILL_OVERRIDES:
        filled = _FILL_OVERRIDES[percent]
    else:
        filled = max(0, min(BAR_WIDTH, percent * 60 // 100))
    return (
        "╔" + "═" * BAR_WIDTH + "╗",
        "║" + "█" * filled + " " * (BAR_WIDTH - filled) + "║",
        "╚" + "═" * BAR_WIDTH + "╝",
    )


def _stage(ctx: CallContext, percent: int, caption: str, note: Optional[str] = None) -> None:
    for line in progress_bar(percent):
        label(ctx, line)
    label(ctx, caption)
    if note is not None:
        ctx.write(note + "\n")


def _chunks_per_side(size: int) -> int:
    quotient = abs(size) // CHUNK_SIZE
    return -quotient if size < 0 else quotient


def voxel_create_world_with_progress(ctx: CallContext, args: Args) -> None:
    if len(args) < 3:
        return
    name, seed, size = _s(args[0]), _atoi(args[1]), _atoi(args[2])
    side = _chunks_per_side(size)
    ctx.write(
        f"[VOXEL] Creating world '{name}' with progress tracking. "
        f"Seed: {seed}, Size: {size}\n"
    )
    label(ctx, "🌍 CREATING MASSIVE PROCEDURAL WORLD...")
    label(ctx, "🌍 World Creation Progress")
    _stage(ctx, 10, "10% Complete - Initializing world systems...")
    _stage(
        ctx, 25, "25% Complete - Generating noise patterns...",
        "[VOXEL] Generating 12 octaves of Perlin noise...",
    )
    _stage(
        ctx, 40, "40% Complete - Creating terrain height maps...",
        f"[VOXEL] Processing {side} x {side} chunk grid...",
    )
    _stage(
        ctx, 55, "55% Complete - Generating biomes and climate...",
        "[VOXEL] Calculating temperature and humidity maps...",
    )
    _stage(
        ctx, 70, "70% Complete - Carving cave systems...",
        "[VOXEL] Creating realistic underground networks...",
    )
    _stage(
        ctx, 85, "85% Complete - Placing ore deposits...",
        "[VOXEL] Distributing rare materials...",
    )
    _stage(
        ctx, 95, "95% Complete - Building surface structures...",
        "[VOXEL] Generating villages and landmarks...",
    )
    _stage(
        ctx, 100, "100% Complete ✅ - 🎉 World creation successful!",
        f"[VOXEL] World '{name}' created with {_wrap_int32(side * side)} chunks!",
    )


def voxel_generate_terrain_with_progress(ctx: CallContext, args: Args) -> None:
    if len(args) < 4:
        return
    seed, scale = _atoi(args[0]), _atof(args[1])
    octaves, persistence = _atoi(args[2]), _atof(args[3])
    label(ctx, "🏔️ Advanced Terrain Generation")
    _stage(
        ctx, 15, "15% Complete - Initializing fractal noise...",
        f"[TERRAIN] Seed: {seed}, Scale: {scale:.3f}",
    )
    _stage(
        ctx, 35, "35% Complete - Generating primary terrain...",
        f"[TERRAIN] Processing {octaves} octaves...",
    )
    _stage(
        ctx, 60, "60% Complete - Adding geological features...",
        f"[TERRAIN] Persistence: {persistence:.2f}, creating realistic formations",
    )
    _stage(
        ctx, 80, "80% Complete - Smoothing and optimization...",
        "[TERRAIN] GPU compute shaders accelerating generation...",
    )
    _stage(ctx, 100, "100% Complete ✅ - ✨ Advanced terrain generated!")


def lighting_setup_with_progress(ctx: CallContext, args: Args) -> None:
    """Set up lighting; the blue channel of the sun colour is always 0.9."""
    if len(args) < 6:
        return
    sun_x, sun_y, sun_z, intensity, r, g = (_atof(a) for a in args[:6])
    b = _float32(0.9)
    label(ctx, "☀️ Photorealistic Lighting Setup")
    _stage(
        ctx, 20, "20% Complete - Calculating sun position...",
        f"[LIGHTING] Sun direction: ({sun_x:.2f}, {sun_y:.2f}, {sun_z:.2f})",
    )
    _stage(
        ctx, 45, "45% Complete - Setting up global illumination...",
        f"[LIGHTING] Intensity: {intensity:.1f}, Color: ({r:.2f}, {g:.2f}, {b:.2f})",
    )
    _stage(
        ctx, 70, "70% Complete - Configuring shadow mapping...",
        "[LIGHTING] Cascaded shadow maps initialized",
    )
    _stage(
        ctx, 90, "90% Complete - Enabling volumetric effects...",
        "[LIGHTING] Atmospheric scattering enabled",
    )
    _stage(ctx, 100, "100% Complete ✅ - 🌅 Photorealistic lighting ready!")


def gpu_systems_init_with_progress(ctx: CallContext, args: Args) -> None:
    label(ctx, "⚡ GPU Systems Initialization")
    _stage(
        ctx, 15, "15% Complete - Compiling compute shaders...",
        "[GPU] Frustum culling, meshing, and lighting shaders",
    )
    _stage(
        ctx, 35, "35% Complete - Allocating GPU memory...",
        "[GPU] 2GB VRAM allocated for voxel processing",
    )
    _stage(
        ctx, 55, "55% Complete - Setting up indirect rendering...",
        "[GPU] Multi-draw indirect commands prepared",
    )
    _stage(
        ctx, 75, "75% Complete - Initializing ML acceleration...",
        "[GPU] Neural network compute kernels loaded",
    )
    _stage(
        ctx, 90, "90% Complete - Optimizing performance...",
        "[GPU] Adaptive quality scaling enabled",
    )
    _stage(ctx, 100, "100% Complete ✅ - 🔥 GPU systems at maximum performance!")


def loading_animation(ctx: CallContext, args: Args) -> None:
    """Show a message, then the message followed by growing dots."""
    if len(args) < 1:
        return
    message = _s(args[0])
    ctx.write(f"[LOADING] {message}")
    label(ctx, message)
    for frame in _ANIMATION_FRAMES:
        animated = message + frame
        label(ctx, animated)
        ctx.write(f"[ANIM] {animated}\n")