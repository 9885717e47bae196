"""Value types threaded through a single bootstrap invocation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .exec import command_text


@dataclass(frozen=True)
class InvocationRequest:
    """Parsed command-line input for one invocation.

    Attributes:
        target: Project directory exactly as the user typed it.
        root: Absolute path of the project directory.
        app_name: Final segment of ``root``; doubles as the package name.
        verbose: Forward ``--verbose`` to the generator.
        use_npm: Force the default package manager.
        use_pnp: Forward ``--use-pnp`` to the generator.
        typescript: Forward ``--typescript`` to the generator.
    """

    target: str
    root: Path
    app_name: str
    verbose: bool = False
    use_npm: bool = False
    use_pnp: bool = False
    typescript: bool = False

    @classmethod
    def from_target(
        cls,
        target: str,
        *,
        base: Path | None = None,
        verbose: bool = False,
        use_npm: bool = False,
        use_pnp: bool = False,
        typescript: bool = False,
    ) -> InvocationRequest:
        """Resolve ``target`` against ``base`` (the cwd by default).

        Example:
            >>> req = InvocationRequest.from_target("my-theme", base=Path("/srv"))
            >>> (str(req.root), req.app_name)
            ('/srv/my-theme', 'my-theme')
        """
        anchor = base if base is not None else Path.cwd()
        root = (anchor / target).resolve()
        return cls(
            target=target,
            root=root,
            app_name=root.name,
            verbose=verbose,
            use_npm=use_npm,
            use_pnp=use_pnp,
            typescript=typescript,
        )


class PackageManager(Enum):
    NPM = "npm"
    YARN = "yarn"


@dataclass(frozen=True)
class PackageManagerChoice:
    manager: PackageManager
    pnp: bool = False

    @property
    def uses_alternate(self) -> bool:
        return self.manager is PackageManager.YARN


@dataclass(frozen=True)
class DelegateCommand:
    """The generator invocation, consumed once by the delegate invoker."""

    executable: str
    args: tuple[str, ...]

    @property
    def argv(self) -> tuple[str, ...]:
        return (self.executable, *self.args)

    @property
    def display(self) -> str:
        return command_text(self.argv)
