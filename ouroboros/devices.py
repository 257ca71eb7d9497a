"""GUI, network, OpenGL and Vulkan built-ins that report what they would do."""

from __future__ import annotations

import math
import re
import struct
from typing import Optional, Sequence

from .context import CallContext

Args = Sequence[Optional[str]]

_INT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_ULONG_MAX = _UINT64_MASK

_WS = r"[ \t\n\v\f\r]*"
_INT_RE = re.compile(_WS + r"([+-]?\d+)")
_HEX_FLOAT_RE = re.compile(
    _WS + r"([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)"
)
_DEC_FLOAT_RE = re.compile(
    _WS + r"([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_UNSIGNED_RE = re.compile(
    _WS + r"([+-]?)(?:(0[xX][0-9a-fA-F]+)|(0[0-7]*)|([1-9]\d*))"
)


def _s(value: Optional[str]) -> str:
    """Text of an argument as ``%s`` shows it."""
    return "(null)" if value is None else value


def _wrap_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _atoi(text: Optional[str]) -> int:
    """Leading decimal integer of ``text`` as a 32-bit int; 0 when there is none."""
    match = _INT_RE.match(text or "")
    return _wrap_int32(int(match.group(1))) if match else 0


def _uint(value: int) -> int:
    return value & _INT32_MASK


def _size_t(value: int) -> int:
    return value & _UINT64_MASK


def _float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _atof(text: Optional[str]) -> float:
    """Leading floating-point number of ``text`` at single precision; 0.0 when none."""
    source = text or ""
    match = _HEX_FLOAT_RE.match(source)
    if match:
        number = float.fromhex(match.group(1))
    else:
        match = _DEC_FLOAT_RE.match(source)
        number = float(match.group(1)) if match else 0.0
    return _float32(number)


def _strtoul(text: Optional[str]) -> int:
    """Leading unsigned integer with base detection (0x hex, 0 octal, else decimal)."""
    match = _UNSIGNED_RE.match(text or "")
    if not match:
        return 0
    sign, hex_part, oct_part, dec_part = match.groups()
    if hex_part:
        number = int(hex_part[2:], 16)
    elif oct_part:
        number = int(oct_part, 8)
    else:
        number = int(dec_part)
    if number > _ULONG_MAX:
        return _ULONG_MAX
    return (-number) & _UINT64_MASK if sign == "-" else number


def _status(ok: int) -> str:
    return "success" if ok else "failed"


# --- GUI ---------------------------------------------------------------

def label(ctx: CallContext, text: Optional[str]) -> None:
    """Draw a text label."""
    ctx.write(f'[GUI] Label: "{_s(text)}" (stub for minimal build)\n')


def init_gui(ctx: CallContext, args: Args) -> None:
    ctx.write("[GUI] GUI initialized (stub for minimal build)\n")


def draw_window(ctx: CallContext, args: Args) -> None:
    if len(args) >= 3:
        title, width, height = _s(args[0]), _atoi(args[1]), _atoi(args[2])
        ctx.write(f"[GUI] Window '{title}' drawn [{width} x {height}] (stub for minimal build)\n")


def draw_label(ctx: CallContext, args: Args) -> None:
    if len(args) >= 1:
        label(ctx, args[0])


def draw_button(ctx: CallContext, args: Args) -> None:
    if len(args) >= 1:
        ctx.write(f"[GUI] Button: [{_s(args[0])}] (stub for minimal build)\n")


def gui_message_loop(ctx: CallContext, args: Args) -> None:
    ctx.write("[GUI] Message loop (stub for minimal build)\n")


# --- Network, events, timers -------------------------------------------

def connect_to_server(ctx: CallContext, args: Args) -> None:
    if len(args) >= 2:
        ctx.write(
            f"[NETWORK] Connect to {_s(args[0])}:{_atoi(args[1])} (stub for minimal build)\n"
        )


def register_event(ctx: CallContext, args: Args) -> None:
    if len(args) >= 2:
        ctx.write(f"[WRAPPER] Registering event: {_s(args[0])} -> {_s(args[1])}\n")


def trigger_event(ctx: CallContext, args: Args) -> None:
    if len(args) >= 1:
        ctx.write(f"[WRAPPER] Triggering event: {_s(args[0])}\n")


def set_timeout(ctx: CallContext, args: Args) -> None:
    if len(args) >= 2:
        ctx.write(f"[WRAPPER] Setting timeout: {_s(args[1])} seconds -> {_s(args[0])}\n")


def http_get(ctx: CallContext, args: Args) -> None:
    if len(args) >= 1:
        ctx.write(f"[HTTP] GET {_s(args[0])} (stub for minimal build)\n")


# --- OpenGL ------------------------------------------------------------

def opengl_init(ctx: CallContext, args: Args) -> None:
    ctx.write("[OPENGL] Init (stub for minimal build)\n")


def opengl_create_context(ctx: CallContext, args: Args) -> None:
    if len(args) >= 3:
        width, height, title = _atoi(args[0]), _atoi(args[1]), _s(args[2])
        ctx.write(
            f"[OPENGL] Create context {width}x{height} '{title}' (stub for minimal build)\n"
        )


def opengl_destroy_context(ctx: CallContext, args: Args) -> None:
    ctx.write("[OPENGL] Destroy context (stub for minimal build)\n")


def opengl_create_shader(ctx: CallContext, args: Args) -> None:
    if len(args) >= 2:
        ctx.write("[OPENGL] Create shader (stub for minimal build)\n")
        ctx.write("Shader created: 1\n")


def opengl_use_shader(ctx: CallContext, args: Args) -> None:
    if len(args) >= 1:
        shader = _uint(_atoi(args[0]))
        ctx.write(f"[OPENGL] Use shader {shader} (stub for minimal build)\n")


def opengl_set_uniform_float(ctx: CallContext, args: Args) -> None:
    if len(args) >= 3:
        name, value = _s(args[1]), _atof(args[2])
        ctx.write(f"[OPENGL] Set uniform float {name} = {value:f} (stub for minimal build)\n")


def opengl_set_uniform_vec3(ctx: CallContext, args: Args) -> None:
    if len(args) >= 5:
        name = _s(args[1])
        x, y, z = (_atof(a) for a in args[2:5])
        ctx.write(
            f"[OPENGL] Set uniform vec3 {name} = ({x:f}, {y:f}, {z:f}) "
            "(stub for minimal build)\n"
        )


def opengl_create_buffer(ctx: CallContext, args: Args) -> None:
    ctx.write("[OPENGL] Create buffer (stub for minimal build)\n")
    ctx.write("Buffer created: 1\n")


def opengl_bind_buffer(ctx: CallContext, args: Args) -> None:
    """Bind a buffer; accepts (buffer, target) or (target, buffer) order.

    A first argument of 0x8000 or more is taken to be the GL target enum.
    """
    if len(args) >= 2:
        first, second = _strtoul(args[0]), _strtoul(args[1])
        if first >= 0x8000:
            buffer, target = second, first
        else:
            buffer, target = first, second
        ctx.write(
            f"[OPENGL] Bind buffer {_uint(buffer)} to target {_wrap_int32(target)} "
            "(stub for minimal build)\n"
        )


def opengl_buffer_data(ctx: CallContext, args: Args) -> None:
    if len(args) >= 4:
        size = _size_t(_atoi(args[1]))
        ctx.write(f"[OPENGL] Buffer data, size {size} (stub for minimal build)\n")


def opengl_create_texture(ctx: CallContext, args: Args) -> None:
    if len(args) >= 4:
        width, height = _atoi(args[0]), _atoi(args[1])
        ctx.write(f"[OPENGL] Create texture {width}x{height} (stub for minimal build)\n")
        ctx.write("Texture created: 1\n")


def opengl_clear(ctx: CallContext, args: Args) -> None:
    if len(args) >= 4:
        r, g, b, a = (_atof(x) for x in args[:4])
        ctx.write(
            f"[OPENGL] Clear with color ({r:f}, {g:f}, {b:f}, {a:f}) "
            "(stub for minimal build)\n"
        )


def opengl_draw_arrays(ctx: CallContext, args: Args) -> None:
    if len(args) >= 3:
        count = _atoi(args[2])
        ctx.write(f"[OPENGL] Draw arrays, count {count} (stub for minimal build)\n")


def opengl_swap_buffers(ctx: CallContext, args: Args) -> None:
    ctx.write("[OPENGL] Swap buffers (stub for minimal build)\n")


def opengl_is_context_valid(ctx: CallContext, args: Args) -> None:
    ctx.write("[OPENGL] Is context valid (stub for minimal build)\n")
    ctx.set_return("1")


# --- Vulkan ------------------------------------------------------------

def vulkan_init(ctx: CallContext, args: Args) -> None:
    ctx.write("[VULKAN] Init (stub for minimal build)\n")


def vulkan_create_instance(ctx: CallContext, args: Args) -> None:
    if len(args) >= 1:
        ctx.write(f"[VULKAN] Create instance for '{_s(args[0])}' (stub for minimal build)\n")
        ctx.write(f"Vulkan instance creation: {_status(1)}\n")


def vulkan_select_physical_device(ctx: CallContext, args: Args) -> None:
    ctx.write("[VULKAN] Select physical device (stub for minimal build)\n")
    ctx.write(f"Vulkan physical device selection: {_status(1)}\n")


def vulkan_create_logical_device(ctx: CallContext, args: Args) -> None:
    ctx.write("[VULKAN] Create logical device (stub for minimal build)\n")
    ctx.write(f"Vulkan logical device creation: {_status(1)}\n")


def vulkan_create_surface(ctx: CallContext, args: Args) -> None:
    if len(args) >= 2:
        ctx.write("[VULKAN] Create surface (stub for minimal build)\n")
        ctx.write(f"Vulkan surface creation: {_status(1)}\n")


def vulkan_create_swapchain(ctx: CallContext, args: Args) -> None:
    if len(args) >= 2:
        width, height = _atoi(args[0]), _atoi(args[1])
        ctx.write(f"[VULKAN] Create swapchain {width}x{height} (stub for minimal build)\n")
        ctx.write(f"Vulkan swapchain creation: {_status(1)}\n")


def vulkan_create_render_pass(ctx: CallContext, args: Args) -> None:
    ctx.write("[VULKAN] Create render pass (stub for minimal build)\n")
    ctx.write(f"Vulkan render pass creation: {_status(1)}\n")


def vulkan_create_graphics_pipeline(ctx: CallContext, args: Args) -> None:
    if len(args) >= 2:
        ctx.write("[VULKAN] Create graphics pipeline (stub for minimal build)\n")
        ctx.write(f"Vulkan graphics pipeline creation: {_status(1)}\n")


def vulkan_create_vertex_buffer(ctx: CallContext, args: Args) -> None:
    if len(args) >= 2:
        size = _size_t(_atoi(args[1]))
        ctx.write(f"[VULKAN] Create vertex buffer, size {size} (stub for minimal build)\n")
        ctx.write(f"Vulkan vertex buffer creation: {_status(1)}\n")


def vulkan_create_command_buffers(ctx: CallContext, args: Args) -> None:
    ctx.write("[VULKAN] Create command buffers (stub for minimal build)\n")
    ctx.write(f"Vulkan command buffers creation: {_status(1)}\n")


def vulkan_draw_frame(ctx: CallContext, args: Args) -> None:
    ctx.write("[VULKAN] Draw frame (stub for minimal build)\n")
    ctx.set_return("1")


def vulkan_cleanup(ctx: CallContext, args: Args) -> None:
    ctx.write("[VULKAN] Cleanup (stub for minimal build)\n")