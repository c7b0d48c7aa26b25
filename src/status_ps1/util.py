from __future__ import annotations
import logging
import subprocess

log = logging.getLogger(__name__)


def run_command(
    *cmd: str, timeout: float | None = None
) -> subprocess.CompletedProcess[str] | None:
    """
    Run a command (suppressing stderr) and return the completed process.  If
    the command cannot be started or its runtime exceeds ``timeout``, return
    `None`.  A nonzero exit status is not an error here; callers inspect
    ``returncode`` themselves.  Undecodable output bytes are replaced with
    U+FFFD.
    """
    try:
        return subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        log.debug("Command %r timed out after %s seconds", cmd, timeout)
        return None
    except OSError as e:
        log.debug("Could not run command %r: %s", cmd, e)
        return None


def output(*cmd: str, timeout: float | None = None) -> str | None:
    """
    Run a command and return its stdout with leading & trailing whitespace
    stripped.  If the command fails, return `None`.
    """
    r = run_command(*cmd, timeout=timeout)
    if r is None or r.returncode != 0:
        return None
    return r.stdout.strip()
