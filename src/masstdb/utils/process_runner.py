"""
Process runner for database client tools.

All backup and restore work is delegated to external programs. The runner
launches them, wires their standard streams to arbitrary file-like objects and
reports the exit status. Connectors receive a runner instance so tests can
substitute a fake one.

Streams are pumped on the calling thread. Standard error goes to an anonymous
temporary file so a chatty tool cannot block on a full pipe while its standard
output is being copied.
"""

import logging
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from typing import BinaryIO, Optional, Sequence

from ..exceptions import ToolNotFoundError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass
class ProcessResult:
    """Outcome of an external process."""

    returncode: int
    output: bytes = b""
    stderr: bytes = b""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def error_text(self) -> str:
        """Decoded diagnostic text: stderr if any, else the combined output."""
        raw = self.stderr or self.output
        return raw.decode("utf-8", errors="replace").strip()


class ProcessRunner:
    """Runs external programs with their streams attached to Python objects."""

    def run(
        self,
        cmd: Sequence[str],
        env: Optional[dict] = None,
        timeout: Optional[float] = None,
    ) -> ProcessResult:
        """
        Run a command and capture stdout and stderr together.

        Args:
            cmd: Program and arguments
            env: Full environment for the child, or None to inherit
            timeout: Seconds before the child is killed

        Returns:
            ProcessResult with the combined output in ``output``

        Raises:
            ToolNotFoundError: If the program does not exist
            subprocess.TimeoutExpired: If the timeout elapsed
        """
        try:
            completed = subprocess.run(
                list(cmd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                env=env,
                timeout=timeout,
            )
        except FileNotFoundError as e:
            raise ToolNotFoundError(cmd[0]) from e

        return ProcessResult(returncode=completed.returncode, output=completed.stdout or b"")

    def stream_to(
        self,
        cmd: Sequence[str],
        sink: BinaryIO,
        env: Optional[dict] = None,
    ) -> ProcessResult:
        """
        Run a command, copying its standard output into ``sink``.

        Raises:
            ToolNotFoundError: If the program does not exist
            OSError: If writing to ``sink`` fails; the child is killed first
        """
        with tempfile.TemporaryFile() as stderr_buffer:
            process = self._spawn(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=stderr_buffer,
                env=env,
            )
            try:
                shutil.copyfileobj(process.stdout, sink, CHUNK_SIZE)
            except BaseException:
                self._kill(process)
                raise
            finally:
                process.stdout.close()

            returncode = process.wait()
            return ProcessResult(returncode=returncode, stderr=self._read_back(stderr_buffer))

    def stream_from(
        self,
        cmd: Sequence[str],
        source: BinaryIO,
        env: Optional[dict] = None,
    ) -> ProcessResult:
        """
        Run a command, feeding ``source`` to its standard input.

        If the child exits before consuming all input, pumping stops and the
        exit status decides the outcome.

        Raises:
            ToolNotFoundError: If the program does not exist
            OSError: If reading from ``source`` fails; the child is killed first
        """
        with tempfile.TemporaryFile() as stderr_buffer:
            process = self._spawn(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.DEVNULL,
                stderr=stderr_buffer,
                env=env,
            )
            broken_pipe: Optional[BrokenPipeError] = None
            try:
                shutil.copyfileobj(source, process.stdin, CHUNK_SIZE)
            except BrokenPipeError as e:
                broken_pipe = e
            except BaseException:
                self._kill(process)
                raise
            finally:
                try:
                    process.stdin.close()
                except BrokenPipeError:
                    pass

            returncode = process.wait()
            if broken_pipe is not None and returncode == 0:
                # The tool exited cleanly without reading everything.
                raise broken_pipe
            return ProcessResult(returncode=returncode, stderr=self._read_back(stderr_buffer))

    def _spawn(self, cmd: Sequence[str], **kwargs) -> subprocess.Popen:
        try:
            return subprocess.Popen(list(cmd), **kwargs)
        except FileNotFoundError as e:
            raise ToolNotFoundError(cmd[0]) from e

    @staticmethod
    def _kill(process: subprocess.Popen) -> None:
        logger.debug(f"Killing {process.args[0]} (pid {process.pid})")
        process.kill()
        process.wait()

    @staticmethod
    def _read_back(buffer) -> bytes:
        buffer.seek(0)
        return buffer.read()
