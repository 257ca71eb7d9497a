import io

import pytest

from ouroboros import voxel
from ouroboros.context import CallContext


def run(func, args):
    out = io.StringIO()
    ctx = CallContext(out)
    func(ctx, list(args))
    return out.getvalue().splitlines()


def test_engine_create_lines():
    lines = run(voxel.voxel_engine_create, [])
    assert lines[0] == "[VOXEL] Creating high-performance voxel engine..."
    assert lines[-1] == "[VOXEL] Voxel engine created successfully!"
    assert len(lines) == 6


def test_create_world():
    lines = run(voxel.voxel_create_world, ["Terra", "42", "256"])
    assert lines[0] == "[VOXEL] Creating world 'Terra' with seed 42, size 256"
    assert lines[-1] == "[VOXEL] World generation complete!"


def test_set_camera_formats_values():
    lines = run(voxel.voxel_set_camera, ["1.25", "2.75", "-3.25", "90.50", "-10.25", "75.5"])
    assert lines == [
        "[VOXEL] Camera position: (1.25, 2.75, -3.25)",
        "[VOXEL] Camera rotation: yaw=90.50°, pitch=-10.25°",
        "[VOXEL] Field of view: 75.5°",
    ]


def test_set_block_and_get_block():
    set_lines = run(voxel.voxel_set_block, ["10", "20", "-30", "GRASS"])
    get_lines = run(voxel.voxel_get_block, ["10", "20", "-30"])
    assert set_lines[0] == "[VOXEL] Setting block at (10, 20, -30) to GRASS"
    assert get_lines == ["[VOXEL] Block at (10, 20, -30): STONE"]


def test_create_sphere():
    lines = run(voxel.voxel_create_sphere, ["1.5", "2.5", "3.5", "4.5", "GOLD"])
    assert lines[0] == "[VOXEL] Creating GOLD sphere at (1.5, 2.5, 3.5) radius 4.5"


def test_raycast():
    lines = run(voxel.voxel_raycast, ["0.5", "64.5", "0.5", "0.25", "-0.75", "0.50"])
    assert lines[0] == (
        "[VOXEL] Raycasting from (0.5, 64.5, 0.5) direction (0.25, -0.75, 0.50)"
    )
    assert lines[1] == "[VOXEL] Hit: STONE block at distance 15.3 units"


def test_set_lighting_fixes_blue_channel():
    lines = run(voxel.voxel_set_lighting, ["0.25", "-1.00", "0.50", "1.5", "0.50", "0.25"])
    assert lines[0] == "[VOXEL] Sun direction: (0.25, -1.00, 0.50)"
    assert lines[1] == "[VOXEL] Sun intensity: 1.5, color: (0.50, 0.25, 0.90)"


def test_lighting_ignores_blue_argument_variation():
    first = run(voxel.voxel_set_lighting, ["0", "1", "0", "1", "0.5", "0.5", "0.1"])
    second = run(voxel.voxel_set_lighting, ["0", "1", "0", "1", "0.5", "0.5", "0.7"])
    assert first == second


def test_generate_terrain():
    lines = run(voxel.voxel_generate_terrain, ["7", "0.25", "6", "0.50"])
    assert lines[1] == "[VOXEL] Seed: 7, Scale: 0.25, Octaves: 6, Persistence: 0.50"


def test_create_material():
    lines = run(voxel.voxel_create_material, ["0.25", "0.50", "0.75", "1.00", "0.25"])
    assert lines[1] == "[VOXEL] Albedo: (0.25, 0.50, 0.75)"
    assert lines[2] == "[VOXEL] Metallic: 1.00, Roughness: 0.25"
    assert lines[3] == "[VOXEL] Material ID: 42"


def test_performance_stats_percent_signs():
    lines = run(voxel.voxel_performance_stats, [])
    assert "[VOXEL] CPU usage: 15% (main thread)" in lines
    assert "[VOXEL] Cache hits: 94.7% (chunk octrees)" in lines


def test_save_and_load_world_name_file():
    saved = run(voxel.voxel_save_world, ["world.dat"])
    loaded = run(voxel.voxel_load_world, ["world.dat"])
    assert saved[0] == "[VOXEL] Saving world to 'world.dat'..."
    assert loaded[0] == "[VOXEL] Loading world from 'world.dat'..."


def test_ml_train_and_predict():
    train = run(voxel.ml_train_lod_model, ["100", "0.0025", "32"])
    predict = run(voxel.ml_predict_performance, ["120.5", "0.75", "60", "847"])
    assert train[1] == "[ML] Epochs: 100, Learning rate: 0.0025, Batch size: 32"
    assert predict[1] == "[ML] Distance: 120.5, Complexity: 0.75"
    assert predict[2] == "[ML] Target FPS: 60, Chunks: 847"


def test_gpu_optimize_and_render():
    optimize = run(voxel.gpu_optimize_performance, ["144", "85.5"])
    render = run(voxel.gpu_render_infinite_world, ["512"])
    assert optimize[0] == "[GPU] Optimizing for 144 FPS, GPU usage: 85.5%"
    assert render[2] == "[GPU] GPU frustum culling: 8,192 chunks -> 512 visible"


def test_demo_benchmark_table_is_framed():
    lines = run(voxel.demo_benchmark_results, [])
    assert lines[0] == "[DEMO] 📊 BENCHMARK RESULTS vs UNREAL ENGINE:"
    assert lines[-1] == "[DEMO] 🎯 RESULT: OUROBOROS VOXEL ENGINE DOMINATES!"
    assert all(line.startswith("[DEMO] ") for line in lines)


@pytest.mark.parametrize(
    "func",
    [
        voxel.voxel_engine_create,
        voxel.voxel_render_frame,
        voxel.voxel_enable_physics,
        voxel.ml_engine_create,
        voxel.gpu_renderer_create,
        voxel.gpu_enable_frustum_culling,
        voxel.demo_lightning_fast,
        voxel.demo_show_capabilities,
    ],
)
def test_argumentless_functions_ignore_arguments(func):
    assert run(func, []) == run(func, ["extra", "args"])
    assert run(func, [])


@pytest.mark.parametrize(
    "func, needed",
    [
        (voxel.voxel_create_world, 3),
        (voxel.voxel_set_camera, 6),
        (voxel.voxel_set_block, 4),
        (voxel.voxel_get_block, 3),
        (voxel.voxel_create_sphere, 5),
        (voxel.voxel_raycast, 6),
        (voxel.voxel_set_lighting, 6),
        (voxel.voxel_generate_terrain, 4),
        (voxel.voxel_create_material, 5),
        (voxel.voxel_save_world, 1),
        (voxel.voxel_load_world, 1),
        (voxel.ml_train_lod_model, 3),
        (voxel.ml_predict_performance, 4),
        (voxel.gpu_optimize_performance, 2),
        (voxel.gpu_render_infinite_world, 1),
    ],
)
def test_too_few_arguments_print_nothing(func, needed):
    assert run(func, ["1"] * (needed - 1)) == []