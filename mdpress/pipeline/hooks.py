"""Stage hooks: ordered mutators run on in-flight content for each source file."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from mdpress.errors import ConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    """Points in the per-file pipeline where content can be mutated."""

    fileload = "fileload"  # raw file text, before front-matter is parsed
    markdown = "markdown"  # markdown body, front-matter removed
    html = "html"  # converted HTML, before token replacement


@dataclass(frozen=True)
class FileContext:
    """Identifies the source file a hook is being run for."""

    path: Path


Hook = Callable[[str, FileContext], str]


def _as_stage(stage: Stage | str) -> Stage:
    try:
        return Stage(stage)
    except ValueError:
        valid = ", ".join(s.value for s in Stage)
        raise InvalidArgumentError(f"Unknown stage '{stage}' (expected one of: {valid})") from None


class HookRegistry:
    """Maps each Stage to an ordered list of hooks.

    Hooks for a stage run in registration order, each receiving the previous
    one's output. A stage with no hooks passes its payload through unchanged.
    """

    def __init__(self) -> None:
        self._hooks: dict[Stage, list[Hook]] = {stage: [] for stage in Stage}

    def register(self, stage: Stage | str, hook: Hook) -> Hook:
        self._hooks[_as_stage(stage)].append(hook)
        return hook

    def on(self, stage: Stage | str) -> Callable[[Hook], Hook]:
        """Decorator form of register()."""
        resolved = _as_stage(stage)

        def decorator(hook: Hook) -> Hook:
            return self.register(resolved, hook)

        return decorator

    def handlers(self, stage: Stage | str) -> list[Hook]:
        return list(self._hooks[_as_stage(stage)])

    def clear(self, stage: Stage | str | None = None) -> None:
        if stage is None:
            for hooks in self._hooks.values():
                hooks.clear()
        else:
            self._hooks[_as_stage(stage)].clear()

    def fire(self, stage: Stage | str, payload: str, context: FileContext) -> str:
        resolved = _as_stage(stage)
        for hook in self._hooks[resolved]:
            payload = hook(payload, context)
        if self._hooks[resolved]:
            logger.debug(
                "fired %s (%d hook(s)) for %s",
                resolved.value, len(self._hooks[resolved]), context.path,
            )
        return payload

    def __len__(self) -> int:
        return sum(len(hooks) for hooks in self._hooks.values())


def load_hook(import_path: str) -> Hook:
    """Resolve ``'package.module:callable'`` to the callable it names."""
    module_path, sep, attr = import_path.partition(":")
    if not sep or not module_path or not attr:
        raise ConfigurationError(
            f"Invalid hook '{import_path}': expected 'package.module:callable'"
        )
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import hook module '{module_path}': {e}") from e
    hook = getattr(module, attr, None)
    if not callable(hook):
        raise ConfigurationError(f"Hook '{import_path}' is not a callable")
    return hook


def registry_from_paths(
    hooks: dict[Stage, list[str]], registry: HookRegistry | None = None
) -> HookRegistry:
    """Register configured import paths on ``registry`` (a new one by default)."""
    registry = registry if registry is not None else HookRegistry()
    for stage, paths in hooks.items():
        for path in paths:
            registry.register(stage, load_hook(path))
    return registry
