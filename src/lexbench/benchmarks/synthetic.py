"""Synthetic inputs for scanner benchmarks.

The shape of every generated text (brace balance, field and statement counts)
depends only on the arguments. Field values come from ``rng``; pass a seeded
``random.Random`` to make them repeatable.
"""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class JsonShape:
    depth: int
    arrays: int
    objects: int


JSON_SHAPES: dict[str, JsonShape] = {
    "small": JsonShape(depth=2, arrays=1, objects=3),
    "medium": JsonShape(depth=4, arrays=3, objects=10),
    "large": JsonShape(depth=6, arrays=5, objects=25),
}
DEFAULT_JSON_SHAPE = JsonShape(depth=3, arrays=2, objects=7)

ARRAY_LENGTH = 5


def generate_json(size: str = "medium", *, rng: random.Random | None = None) -> str:
    """Generates a nested JSON object for a size class.

    Unknown size names fall back to a shape between small and medium.
    """

    shape = JSON_SHAPES.get(size, DEFAULT_JSON_SHAPE)
    return _json_object(shape.depth, shape.arrays, shape.objects, rng or random.Random())


def _json_object(depth: int, arrays: int, objects: int, rng: random.Random) -> str:
    if depth <= 0:
        return "null"

    fields = [
        f'  "string_field": "test value {rng.randrange(1000)}"',
        f'  "number_field": {rng.randrange(1000)}',
        f'  "boolean_field": {"true" if rng.randrange(2) == 1 else "false"}',
    ]

    items = ", ".join(f'"item_{j}"' for j in range(ARRAY_LENGTH))
    fields.extend(f'  "array_{i}": [{items}]' for i in range(arrays))

    for i in range(objects):
        child = _json_object(depth // 2, arrays // 2, objects // 2, rng)
        fields.append(f'  "nested_{i}": {child}')

    return "{\n" + ",\n".join(fields) + "\n}"


def generate_javascript(line_count: int = 100) -> str:
    """JavaScript-like text: a recursive function and ``line_count`` call sites.

    A checkpoint comment follows every tenth statement pair, starting with
    the first.
    """

    parts = [
        "// Generated JavaScript test code\n",
        "function fibonacci(n) {\n",
        "  if (n <= 1) return n;\n",
        "  return fibonacci(n - 1) + fibonacci(n - 2);\n",
        "}\n\n",
    ]

    for i in range(int(line_count)):
        parts.append(f"const result{i} = fibonacci({i % 20});\n")
        parts.append(f"console.log('Result {i}:', result{i});\n")
        if i % 10 == 0:
            parts.append(f"\n// Checkpoint {i}\n")

    parts.append("\nexport { fibonacci };\n")
    return "".join(parts)


def generate_program(line_count: int) -> str:
    """Small function body of conditional assignments."""

    parts = ["function test() {\n"]
    for i in range(int(line_count)):
        parts.append(f"  if (condition{i}) {{\n")
        parts.append(f"    value{i} = {i};\n")
        parts.append("  }\n")
    parts.append("}\n")
    return "".join(parts)


def generate_function_code(line_count: int) -> str:
    parts = [
        "// Generated function code for benchmarking\n",
        "function fibonacci(n) {\n",
        "  if (n <= 1) return n;\n",
        "  return fibonacci(n - 1) + fibonacci(n - 2);\n",
        "}\n\n",
    ]
    for i in range(int(line_count)):
        parts.append(f"const result{i} = fibonacci({i % 20});\n")
        parts.append(f"console.log(`Result ${{i}}: ${{result{i}}}`);\n")
        if i % 10 == 0 and i > 0:
            parts.append(f"\n// Checkpoint {i}\n")
    parts.append("\nexport { fibonacci };\n")
    return "".join(parts)


def generate_class_code(line_count: int) -> str:
    parts = [
        "// Generated class code for benchmarking\n",
        "class Calculator {\n",
        "  constructor() {\n",
        "    this.operations = [];\n",
        "  }\n\n",
    ]
    for i in range(int(line_count) // 4):
        parts.append(f"  add{i}(a, b) {{\n")
        parts.append("    const result = a + b;\n")
        parts.append("    this.operations.push({ op: 'add', args: [a, b], result });\n")
        parts.append("    return result;\n")
        parts.append("  }\n\n")
    parts.append("  getHistory() {\n    return this.operations;\n  }\n}\n\n")
    parts.append("export default Calculator;\n")
    return "".join(parts)


def generate_module_code(line_count: int) -> str:
    parts = [
        "// Generated module code for benchmarking\n",
        "import { EventEmitter } from 'events';\n",
        "import * as fs from 'fs';\n\n",
    ]
    for i in range(int(line_count) // 6):
        parts.append(f"export function process{i}(data) {{\n")
        parts.append("  if (!data || typeof data !== 'object') {\n")
        parts.append("    throw new Error('Invalid data provided');\n")
        parts.append("  }\n")
        parts.append(f"  return {{ ...data, processed: true, id: {i} }};\n")
        parts.append("}\n\n")
    parts.append("export const VERSION = '1.0.0';\n")
    parts.append("export const CONSTANTS = { MAX_SIZE: 1000 };\n")
    return "".join(parts)


def generate_expression_code(line_count: int) -> str:
    """One arithmetic assignment per line; the divisor is never zero."""

    return "".join(f"result{i} = (a{i} + b{i}) * c{i} / {i + 1};\n" for i in range(int(line_count)))


def generate_scaling_code(line_count: int) -> str:
    """Repeating five-line block of brace-delimited statements."""

    templates = (
        "if (condition{i}) {{\n",
        "  let value{i} = calculate({i});\n",
        "  result = value{i} + {i};\n",
        "  process(result);\n",
        "}}\n",
    )
    return "".join(templates[i % 5].format(i=i) for i in range(int(line_count)))


def generate_scaling_content(target_tokens: int) -> str:
    """Keyword-heavy text sized at roughly four tokens per line."""

    templates = (
        "if condition{i} then\n",
        "  value{i} = {i}\n",
        "  result = value{i}\n",
        "else\n",
    )
    return "".join(templates[i % 4].format(i=i) for i in range(int(target_tokens) // 4))


def generate_js_content(line_count: int) -> str:
    parts = ["function testCode() {\n"]
    for i in range(int(line_count)):
        parts.append(f"  const value{i} = {i} + {i * 2};\n")
        parts.append(f"  if (value{i} > 10) {{\n")
        parts.append(f"    return value{i};\n")
        parts.append("  }\n")
    parts.append("}\n")
    return "".join(parts)
