# topmark:header:start
#
#   project      : Docify
#   file         : invoker.py
#   file_relpath : src/docify/pipeline/invoker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the external documentation tool (``solidity-docgen``).

The tool is a Node.js program installed under ``node_modules``. It is run
synchronously as a child process that inherits stdin and stdout; its error
stream is captured. The tool does not reliably signal failure through its exit
status, so any output on its error stream is treated as a failure, and so is a
nonzero exit status.

Before launching, the compiler module the tool loads (``node_modules/solc``)
must be resolvable.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from docify.config.logging import get_logger
from docify.constants import DOCGEN_CLI_RELPATH, SOLC_MODULE_NAME
from docify.core.errors import CompilerModuleNotFoundError, ToolFailedError, ToolLaunchError

if TYPE_CHECKING:
    from docify.config import CompilerSettings, Config
    from docify.config.logging import DocifyLogger

logger: DocifyLogger = get_logger(__name__)


def is_node_module_resolvable(module_path: Path) -> bool:
    """Return True if Node.js could load ``module_path`` with ``require()``.

    A module resolves when it is a directory holding ``package.json`` or
    ``index.js``, or when ``<module_path>.js`` is a file.
    """
    if module_path.is_dir():
        return (module_path / "package.json").is_file() or (module_path / "index.js").is_file()
    if module_path.is_file():
        return True
    return module_path.with_name(f"{module_path.name}.js").is_file()


class DocgenInvoker:
    """Build and run the documentation tool command line.

    Args:
        input_dir (Path): Source tree handed to the tool.
        output_dir (Path): Directory the tool renders documents into.
        templates_dir (Path): Template directory.
        node_modules_dir (Path): Directory holding the tool and the compiler module.
        compiler (CompilerSettings): Settings serialized into ``--solc-settings``.
        node_executable (str): Program used to run the tool's entry point.
    """

    def __init__(
        self,
        *,
        input_dir: Path,
        output_dir: Path,
        templates_dir: Path,
        node_modules_dir: Path,
        compiler: CompilerSettings,
        node_executable: str = "node",
    ) -> None:
        self.input_dir = input_dir
        self.output_dir = output_dir
        self.templates_dir = templates_dir
        self.node_modules_dir = node_modules_dir
        self.compiler = compiler
        self.node_executable = node_executable

    @classmethod
    def from_config(cls, config: Config) -> DocgenInvoker:
        """Build an invoker from the runtime configuration."""
        return cls(
            input_dir=config.input_dir,
            output_dir=config.output_dir,
            templates_dir=config.templates_dir,
            node_modules_dir=config.node_modules_dir,
            compiler=config.compiler,
            node_executable=config.node_executable,
        )

    @property
    def solc_module_path(self) -> Path:
        """Absolute path of the compiler module passed to ``--solc-module``."""
        return (self.node_modules_dir / SOLC_MODULE_NAME).resolve()

    @property
    def cli_script(self) -> Path:
        """Path of the tool's command-line entry point."""
        return self.node_modules_dir.joinpath(*DOCGEN_CLI_RELPATH)

    def check_compiler_module(self) -> None:
        """Verify the compiler module can be resolved before invoking the tool.

        Raises:
            CompilerModuleNotFoundError: If the module is missing.
        """
        module_path: Path = self.solc_module_path
        if not is_node_module_resolvable(module_path):
            logger.error("Compiler module not found at %s", module_path)
            raise CompilerModuleNotFoundError(
                f'Solidity compiler module not found at "{module_path}". '
                "Please ensure 'solc' is installed.",
                path=module_path,
            )
        logger.debug("Compiler module resolved: %s", module_path)

    def build_command(self) -> list[str]:
        """Return the argument vector used to run the tool."""
        return [
            self.node_executable,
            str(self.cli_script),
            f"--input={self.input_dir}",
            f"--output={self.output_dir}",
            f"--templates={self.templates_dir}",
            f"--solc-module={self.solc_module_path}",
            f"--solc-settings={self.compiler.to_json()}",
        ]

    def run(self) -> None:
        """Check the compiler module, then run the tool to completion.

        Raises:
            CompilerModuleNotFoundError: If the compiler module is missing.
            ToolLaunchError: If the process cannot be started.
            ToolFailedError: If the tool wrote to its error stream or exited nonzero.
        """
        self.check_compiler_module()

        cmd: list[str] = self.build_command()
        logger.info("Running documentation tool: %s", " ".join(cmd[:2]))
        logger.debug("Documentation tool arguments: %s", cmd)
        try:
            result: subprocess.CompletedProcess[bytes] = subprocess.run(
                cmd,
                stdin=None,
                stdout=None,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            logger.error("Error executing documentation tool: %s", e)
            raise ToolLaunchError(f"Error executing solidity-docgen: {e}") from e

        stderr: str = result.stderr.decode("utf-8", errors="replace") if result.stderr else ""
        if stderr:
            logger.error("Documentation tool reported errors:\n%s", stderr)
            raise ToolFailedError(
                f"Error in solidity-docgen output: {stderr.rstrip()}",
                returncode=result.returncode,
                stderr=stderr,
            )
        if result.returncode != 0:
            logger.error("Documentation tool exited with status %d", result.returncode)
            raise ToolFailedError(
                f"solidity-docgen exited with status {result.returncode}",
                returncode=result.returncode,
                stderr=stderr,
            )
        logger.info("Documentation tool completed: %s", self.output_dir)
