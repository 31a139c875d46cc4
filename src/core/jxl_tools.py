"""
Interface to the libjxl command-line tools.

This module builds and runs the cjxl/djxl commands synchronously. The
expected failure path (a non-zero exit status) is reported through the
returned result objects rather than by raising, so callers can show the
captured tool output directly.
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .config import (
    JXL_EXTENSION,
    LIBJXL_DOWNLOAD_URL,
    MAX_QUALITY,
    MIN_QUALITY,
    PREVIEW_EXTENSION,
    TEMP_PREVIEW_PREFIX,
    get_cjxl_command,
    get_djxl_command,
)
from .errors import DependencyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one encoder run; output_path is only meaningful on success."""

    success: bool
    output_path: Path | None
    message: str


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of one decoder run; temp_path is only meaningful on success."""

    success: bool
    temp_path: Path | None
    message: str


def run_tool(cmd: list[str]) -> tuple[str, int]:
    """
    Run an external tool and capture its combined output.

    Args:
        cmd: Command and arguments, passed without a shell

    Returns:
        Tuple of (combined stdout/stderr text, exit status)

    Raises:
        OSError: If the executable cannot be started
    """
    logger.debug(f"Running command: {' '.join(cmd)}")
    result = subprocess.run(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        check=False,
    )
    return result.stdout or "", result.returncode


def _probe(tool: str) -> bool:
    try:
        _, exit_code = run_tool([tool, "--version"])
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning(f"Could not run {tool}: {e}")
        return False
    if exit_code != 0:
        logger.warning(f"{tool} --version exited with status {exit_code}")
    return exit_code == 0


def find_missing_tools() -> list[str]:
    """
    Probe the encoder and decoder with a version query.

    Returns:
        Names of the tools that could not be run or exited non-zero
    """
    return [tool for tool in (get_cjxl_command(), get_djxl_command()) if not _probe(tool)]


def tools_available() -> bool:
    """Check that both cjxl and djxl can be run from the search path."""
    return not find_missing_tools()


def clamp_quality(quality: int) -> int:
    """Clamp a quality value into the encoder's accepted range."""
    return max(MIN_QUALITY, min(MAX_QUALITY, quality))


def jxl_output_path(input_path: Path) -> Path:
    """Return the input path with its extension replaced by .jxl."""
    return input_path.with_suffix(JXL_EXTENSION)


def temp_preview_path(jxl_path: Path) -> Path:
    """Return the temp-directory PNG path used to preview a JXL file."""
    preview_name = TEMP_PREVIEW_PREFIX + jxl_path.with_suffix(PREVIEW_EXTENSION).name
    return Path(tempfile.gettempdir()) / preview_name


def convert_to_jxl(input_path: str | Path, quality: int) -> ConversionResult:
    """
    Encode a raster image to JPEG XL next to the source file.

    Args:
        input_path: Source image
        quality: Encoder quality, clamped to [1, 100]

    Returns:
        ConversionResult; on failure the message embeds the tool output verbatim
    """
    input_path = Path(input_path)
    output_path = jxl_output_path(input_path)
    quality = clamp_quality(quality)
    cmd = [get_cjxl_command(), str(input_path), str(output_path), "-q", str(quality)]

    try:
        output, exit_code = run_tool(cmd)
    except OSError as e:
        logger.error(f"Could not start encoder: {e}")
        return ConversionResult(False, None, f"Conversion failed: {e}")

    if exit_code == 0:
        logger.info(f"Converted {input_path} to {output_path} (quality {quality})")
        return ConversionResult(True, output_path, f"Successfully converted to: {output_path}")

    logger.warning(f"Encoder exited with status {exit_code} for {input_path}")
    return ConversionResult(False, None, f"Conversion failed: {output}")


def decode_jxl_to_temp(jxl_path: str | Path) -> DecodeResult:
    """
    Decode a JPEG XL file to a PNG in the temp directory for previewing.

    Args:
        jxl_path: JPEG XL file to decode

    Returns:
        DecodeResult; on failure the message embeds the tool output verbatim
    """
    jxl_path = Path(jxl_path)
    temp_path = temp_preview_path(jxl_path)
    cmd = [get_djxl_command(), str(jxl_path), str(temp_path)]

    try:
        output, exit_code = run_tool(cmd)
    except OSError as e:
        logger.error(f"Could not start decoder: {e}")
        return DecodeResult(False, None, f"Decoding failed: {e}")

    if exit_code == 0:
        logger.info(f"Decoded {jxl_path} to {temp_path}")
        return DecodeResult(True, temp_path, "Decoded JXL successfully")

    logger.warning(f"Decoder exited with status {exit_code} for {jxl_path}")
    # djxl may leave a partial file behind
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not delete partial preview {temp_path}: {e}")
    return DecodeResult(False, None, f"Decoding failed: {output}")


def tools_unavailable_error(missing: list[str]) -> DependencyError:
    """Build the startup error naming the tools that could not be run."""
    return DependencyError(
        missing=missing,
        user_message=f"Error: libjxl tools ({', '.join(missing)}) not found in PATH.",
        help_url=LIBJXL_DOWNLOAD_URL,
        technical_message=f"'<tool> --version' failed for: {', '.join(missing)}",
    )
