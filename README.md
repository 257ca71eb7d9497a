# ouroboros

Runtime pieces for the Ouroboros scripting language. The package supplies the
parts that a tree-walking interpreter uses while it runs a program: variable
scopes, a symbol table, a class registry, an object heap with access
modifiers, value helpers that work on string values, and a set of simulated
built-in functions.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `ouroboros.stack`: `StackFrame(name, parent)` is a scope that links to its
  parent. `set_variable` writes to the frame itself. `get_variable` looks in
  the frame first and then in each parent. A frame can hold 64 variables. When
  a new one would go past that, `VariableLimitError` is raised.
- `ouroboros.symbol`: `SymbolTable` is a flat table of names and values. It
  holds at most 100 symbols, and `SymbolTableFullError` is raised when a new
  one will not fit. It provides `define`, `lookup`, `len()` and `in`.
- `ouroboros.values`: `ReturnSlot` holds the last return value, which reads
  as `"0"` until something is set. The module also has `is_truthy`,
  `value_length`, `parse_object_ref` and `default_for_type`.
- `ouroboros.classes`: `ClassRegistry` records classes with a parent name and
  default field values. It provides `find`, `parent_of`, `lineage` and
  `default_fields`.
- `ouroboros.objects`: `ObjectHeap` creates objects named `Class#id`. Each
  class also gets a companion static object. Property reads honour public and
  private access (`AccessModifier`). `resolve_member` evaluates `target.name`
  for an `obj:<id>` reference or for a class name, and `length` works on any
  value.
- `ouroboros.timer`: `set_timeout(callback, seconds, out, sleep)` writes a
  notice, sleeps, and then returns the callback's result.
- `ouroboros.context`: `CallContext` gives a built-in function an output
  stream and a return-value slot.
- `ouroboros.devices`, `ouroboros.voxel`, `ouroboros.progress`: these are the
  built-in functions. Each one takes `(ctx, args)`, where `args` is a list of
  strings. They cover GUI, network, OpenGL, Vulkan, voxel engine, machine
  learning, GPU renderer and progress-bar narration. None of them touches real
  hardware or the network. Each writes the log lines it is defined to write and
  sets a fixed return value where one applies.

## Examples

```python
from ouroboros.values import is_truthy, value_length, parse_object_ref

is_truthy("false")              # False
value_length("[[1, 2], [3, 4]]")  # 2
parse_object_ref("obj:7")       # 7
```

```python
from ouroboros.classes import ClassRegistry
from ouroboros.objects import ObjectHeap

classes = ClassRegistry()
classes.register("Point", None, {"x": "0", "y": "0"})
heap = ObjectHeap(classes)

point = heap.create_object("Point")
point.class_name                      # "Point#1"
heap.resolve_member("obj:1", "x")     # "0"
heap.resolve_member("hello", "length")  # "5"
```

```python
import io

from ouroboros.context import CallContext
from ouroboros.devices import draw_window, opengl_is_context_valid

out = io.StringIO()
ctx = CallContext(out)
draw_window(ctx, ["Main", "640", "480"])
opengl_is_context_valid(ctx, [])
ctx.return_value   # "1"
print(out.getvalue())
```

## What it does not do

This package is not a complete interpreter. It has no parser and no
expression evaluator. It has no registry that looks up built-in functions by
name, so the caller has to call those functions directly. It has no
command-line program for running scripts. The graphics, network, HTTP and
voxel built-ins only report what they would do: they open no windows and no
connections, and they save no files.