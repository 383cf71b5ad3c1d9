"""Scaffolding generation through the installed ``uniffi-bindgen`` executable.

Running the command-line tool keeps the scaffolding and the foreign-language
bindings on the same installed generator version. No timeout is applied unless
one is configured: cancellation belongs to the build orchestrator.
"""

from __future__ import annotations

import re
import shutil
import subprocess
from dataclasses import dataclass

from scaffold_bridge.config import DEFAULT_BINDGEN_EXECUTABLE, VersionPolicy
from scaffold_bridge.errors import GenerationError, ToolInvocationError, ValidationError
from scaffold_bridge.models import ScaffoldingRequest, ScaffoldingResult

SCAFFOLDING_SUBCOMMAND = "scaffolding"
STDERR_CONTEXT_LIMIT = 2000
VERSION_PATTERN = re.compile(r"\b\d+\.\d+(?:\.\d+)?(?:-[0-9A-Za-z.]+)?(?:\+[0-9A-Za-z.]+)?\b")


class GeneratorVersionWarning(UserWarning):
    """Warning issued when the installed generator is not the pinned version."""


@dataclass(slots=True)
class ExternalProcessStrategy:
    name: str = "external"
    executable: str = DEFAULT_BINDGEN_EXECUTABLE
    timeout: float | None = None
    required_version: str | None = None
    version_policy: VersionPolicy = "warn"

    def command_for(self, request: ScaffoldingRequest, executable: str | None = None) -> list[str]:
        return [
            executable or self.executable,
            SCAFFOLDING_SUBCOMMAND,
            "--out-dir",
            str(request.out_dir),
            str(request.interface_file),
        ]

    def produce_scaffolding(self, request: ScaffoldingRequest) -> ScaffoldingResult:
        executable = self._resolve_executable()
        version: str | None = None
        diagnostics: tuple[str, ...] = ()
        if self.required_version:
            version, diagnostics = self._check_version(executable)
        cmd = self.command_for(request, executable)

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise GenerationError(
                f"`{self.executable}` did not finish within {self.timeout} seconds.",
                hint="Raise the timeout or inspect the generator for a hang.",
                context={
                    "stage": "generation",
                    "strategy": self.name,
                    "command": " ".join(cmd),
                },
            ) from exc
        except OSError as exc:
            raise ToolInvocationError(
                f"Failed to run `{self.executable}`: {exc.strerror or exc}.",
                hint="Check that the generator executable is installed and runnable.",
                context={
                    "stage": "launch",
                    "strategy": self.name,
                    "executable": executable,
                    "command": " ".join(cmd),
                },
            ) from exc

        if result.returncode != 0:
            raise GenerationError(
                "Error while generating scaffolding code.",
                hint="Check the generator output for details.",
                context={
                    "stage": "generation",
                    "strategy": self.name,
                    "returncode": str(result.returncode),
                    "stderr": result.stderr[:STDERR_CONTEXT_LIMIT] if result.stderr else "",
                    "command": " ".join(cmd),
                },
            )

        return ScaffoldingResult.for_request(
            request,
            strategy="external",
            command=tuple(cmd),
            generator_version=version,
            diagnostics=diagnostics,
        )

    def _resolve_executable(self) -> str:
        resolved = shutil.which(self.executable)
        if resolved is None:
            raise ToolInvocationError(
                f"Failed to run `{self.executable}`: not found in PATH.",
                hint=(
                    "Install the generator (e.g. `cargo install uniffi_bindgen`) at the same "
                    "version as the runtime library, or enable the builtin-bindgen feature."
                ),
                context={
                    "stage": "launch",
                    "strategy": self.name,
                    "executable": self.executable,
                },
            )
        return resolved

    def _check_version(self, executable: str) -> tuple[str | None, tuple[str, ...]]:
        """Compare the installed generator version against ``required_version``.

        Returns the detected version (``None`` when it cannot be determined) and
        the mismatch notices the caller should surface. Nothing is reported
        through the global ``warnings`` machinery here.
        """
        cmd = [executable, "--version"]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ToolInvocationError(
                f"`{self.executable} --version` did not finish within {self.timeout} seconds.",
                hint="Raise the timeout or inspect the generator for a hang.",
                context={
                    "stage": "launch",
                    "strategy": self.name,
                    "command": " ".join(cmd),
                },
            ) from exc
        except OSError as exc:
            raise ToolInvocationError(
                f"Failed to run `{self.executable}`: {exc.strerror or exc}.",
                hint="Check that the generator executable is installed and runnable.",
                context={
                    "stage": "launch",
                    "strategy": self.name,
                    "executable": executable,
                    "command": " ".join(cmd),
                },
            ) from exc

        version = parse_version(result.stdout) if result.returncode == 0 else None
        if version == self.required_version:
            return version, ()

        if version is None:
            message = (
                f"Could not determine the `{self.executable}` version; the required "
                f"version is {self.required_version}."
            )
        else:
            message = (
                f"`{self.executable}` version {version} does not match the required "
                f"version {self.required_version}."
            )
        if self.version_policy == "allow":
            return version, ()
        if self.version_policy == "warn":
            return version, (message,)
        if self.version_policy == "error":
            raise ToolInvocationError(
                message,
                hint="Install the generator version that matches the runtime library.",
                context={
                    "stage": "launch",
                    "strategy": self.name,
                    "version": version or "unknown",
                    "required": self.required_version or "",
                },
            )
        raise ValidationError(f"Unsupported version_policy value: {self.version_policy}")


def parse_version(output: str) -> str | None:
    """Find the version in ``--version`` output such as ``uniffi-bindgen 0.25.0 (abc 2023-01-01)``."""
    match = VERSION_PATTERN.search(output)
    return match.group(0) if match else None
