import io

import pytest

from ouroboros.context import CallContext
from ouroboros.progress import (
    BAR_WIDTH,
    gpu_systems_init_with_progress,
    lighting_setup_with_progress,
    loading_animation,
    progress_bar,
    voxel_create_world_with_progress,
    voxel_generate_terrain_with_progress,
)


def run(func, args):
    buf = io.StringIO()
    func(CallContext(out=buf), args)
    return buf.getvalue()


def filled(percent):
    return progress_bar(percent)[1].count("█")


def test_full_bar_is_solid():
    top, bar, bottom = progress_bar(100)
    assert bar == "║" + "█" * BAR_WIDTH + "║"
    assert top.startswith("╔") and top.endswith("╗")
    assert bottom.startswith("╚") and bottom.endswith("╝")


@pytest.mark.parametrize("percent", [10, 15, 25, 40, 55, 70, 85, 90, 95, 100])
def test_bar_lines_share_width(percent):
    lines = progress_bar(percent)
    assert len({len(line) for line in lines}) == 1


def test_fill_grows_with_percent():
    stages = [10, 15, 20, 25, 35, 40, 45, 55, 60, 70, 75, 80, 85, 90, 95, 100]
    counts = [filled(p) for p in stages]
    assert counts == sorted(counts)
    assert filled(10) == 6


def test_world_creation_reports_chunks():
    out = run(voxel_create_world_with_progress, ["earth", "7", "32"])
    assert out.startswith(
        "[VOXEL] Creating world 'earth' with progress tracking. Seed: 7, Size: 32\n"
    )
    assert "[VOXEL] Processing 1 x 1 chunk grid...\n" in out
    assert out.endswith("[VOXEL] World 'earth' created with 1 chunks!\n")
    assert "[VOXEL] Generating 12 octaves of Perlin noise...\n" in out


def test_world_creation_needs_three_args():
    assert run(voxel_create_world_with_progress, ["earth", "7"]) == ""


def test_terrain_stages_in_order():
    out = run(voxel_generate_terrain_with_progress, ["5", "0.5", "4", "0.25"])
    first = out.index("15% Complete")
    last = out.index("100% Complete")
    assert first < out.index("35% Complete") < out.index("80% Complete") < last
    assert "[TERRAIN] Processing 4 octaves...\n" in out


def test_lighting_uses_fixed_blue():
    out = run(lighting_setup_with_progress, ["0", "1", "0", "2", "1", "0.5"])
    assert "[LIGHTING] Intensity: 2.0, Color: (1.00, 0.50, 0.90)\n" in out
    assert run(lighting_setup_with_progress, ["0"] * 5) == ""


def test_gpu_init_labels_and_notes():
    out = run(gpu_systems_init_with_progress, [])
    assert out.startswith('[GUI] Label: "⚡ GPU Systems Initialization"')
    assert "[GPU] 2GB VRAM allocated for voxel processing\n" in out
    assert out.count("Complete") == 6


def test_loading_animation_frames():
    out = run(loading_animation, ["Wait"])
    assert out.startswith('[LOADING] Wait[GUI] Label: "Wait"')
    assert out.count("[ANIM] ") == 4
    assert out.endswith("[ANIM] Wait...\n")


def test_loading_animation_without_message():
    assert run(loading_animation, []) == ""