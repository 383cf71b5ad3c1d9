"""In-process scaffolding generation for developing the generator itself.

Calls the generator library directly instead of spawning the command-line
tool. Only safe when the generator and the bindings come from the same source
tree, since nothing checks for version skew here.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Protocol

from scaffold_bridge.config import DEFAULT_INPROCESS_GENERATOR
from scaffold_bridge.errors import ToolInvocationError
from scaffold_bridge.models import ScaffoldingRequest, ScaffoldingResult


class ScaffoldingGenerator(Protocol):
    def __call__(
        self,
        interface_file: str,
        out_dir: str | None,
        namespace: str | None,
        self_contained: bool,
    ) -> object: ...


@dataclass(slots=True)
class InProcessStrategy:
    name: str = "inprocess"
    generator: ScaffoldingGenerator | None = None
    generator_ref: str = DEFAULT_INPROCESS_GENERATOR

    def produce_scaffolding(self, request: ScaffoldingRequest) -> ScaffoldingResult:
        generate = self._resolve_generator()
        # No namespace override; helpers are inlined into the generated file.
        generate(str(request.interface_file), str(request.out_dir), None, True)
        return ScaffoldingResult.for_request(request, strategy="inprocess")

    def _resolve_generator(self) -> ScaffoldingGenerator:
        if self.generator is None:
            self.generator = load_generator(self.generator_ref, strategy=self.name)
        return self.generator


def load_generator(ref: str, *, strategy: str = "inprocess") -> ScaffoldingGenerator:
    """Import a ``module:attribute`` generator reference."""
    module_name, _, attribute = ref.partition(":")
    if not module_name or not attribute:
        raise ToolInvocationError(
            f"Invalid generator reference `{ref}`.",
            hint="Use the `package.module:function` form.",
            context={"stage": "launch", "strategy": strategy, "generator": ref},
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ToolInvocationError(
            f"Failed to import generator module `{module_name}`.",
            hint="Install the generator library or disable the builtin-bindgen feature.",
            context={"stage": "launch", "strategy": strategy, "generator": ref},
        ) from exc
    generator = getattr(module, attribute, None)
    if not callable(generator):
        raise ToolInvocationError(
            f"Generator `{ref}` is not callable.",
            context={"stage": "launch", "strategy": strategy, "generator": ref},
        )
    return generator

