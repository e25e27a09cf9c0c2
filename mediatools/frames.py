"""Probe videos with ffprobe and split or join frame sequences with ffmpeg."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

_U32_MAX = 2**32 - 1

_PROBE_PREFIX = [
    "ffprobe",
    "-v", "error",
    "-select_streams", "v:0",
]
_PROBE_FORMAT = ["-of", "default=noprint_wrappers=1:nokey=1"]


class FrameToolError(Exception):
    """Raised when probing a video fails or yields unusable output."""


@dataclass(frozen=True)
class FrameRate:
    """A frame rate as the ratio numerator/denominator."""

    numerator: int
    denominator: int


@dataclass(frozen=True)
class MinSize:
    """A one-dimensional span given by its start and its length."""

    min: int
    size: int


def _parse_u32(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(digits)
    if value > _U32_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def _probe(input_file: str, entry: str) -> str:
    command = [*_PROBE_PREFIX, "-show_entries", entry, *_PROBE_FORMAT, input_file]
    try:
        result = subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as error:
        raise FrameToolError(f"could not run ffprobe: {error}") from error
    try:
        return result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError as error:
        raise FrameToolError("ffprobe output is not valid UTF-8") from error


def frame_pattern(prefix: str, frame_count: int) -> str:
    """Return the numbered JPEG file pattern for a sequence of frame_count frames."""
    if frame_count < 1:
        raise ValueError("frame_count must be positive")
    return f"{prefix}_%0{len(str(frame_count))}d.jpg"


def count_frames(input_file: str) -> int:
    """Return the number of frames in the first video stream of input_file."""
    text = _probe(input_file, "stream=nb_frames")
    try:
        return _parse_u32(text)
    except ValueError as error:
        raise FrameToolError(f"invalid frame count: {text!r}") from error


def frames_per_second(input_file: str) -> FrameRate:
    """Return the frame rate of the first video stream of input_file."""
    text = _probe(input_file, "stream=r_frame_rate")
    parts = text.split("/")
    if len(parts) != 2:
        raise FrameToolError(f"frame rate is not a ratio: {text!r}")
    numerator_text, denominator_text = parts
    try:
        numerator = _parse_u32(numerator_text)
    except ValueError as error:
        raise FrameToolError(f"invalid numerator: {numerator_text!r}") from error
    try:
        denominator = _parse_u32(denominator_text)
    except ValueError as error:
        raise FrameToolError(f"invalid denominator: {denominator_text!r}") from error
    return FrameRate(numerator, denominator)


def _run_quiet(command: list[str]) -> int:
    completed = subprocess.run(
        command,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=False,
    )
    return completed.returncode


def extract_frames(
    input_file: str,
    output_file: str,
    frame_count: int,
    ranges: tuple[MinSize, MinSize],
) -> int:
    """Save the first frame_count frames, cropped to ranges (x, y), as JPEG files.

    Returns the exit code of ffmpeg.
    """
    horizontal, vertical = ranges
    output_format = frame_pattern(output_file, frame_count)
    crop_filter = (
        f"crop={horizontal.size}:{vertical.size}:{horizontal.min}:{vertical.min}"
    )
    command = [
        "ffmpeg",
        "-i", input_file,
        "-frames:v", str(frame_count),
        "-q:v", "2",
        "-vf", crop_filter,
        output_format,
    ]
    return _run_quiet(command)


def assemble_video(
    input_file: str,
    output_file: str,
    fps: str,
    frame_count: int,
    clip: MinSize | None = None,
) -> int:
    """Encode a numbered JPEG sequence into an H.264 video.

    When clip is given, only clip.size frames starting at number clip.min are used.
    Returns the exit code of ffmpeg.
    """
    input_format = frame_pattern(input_file, frame_count)
    command = [
        "ffmpeg",
        "-y",
        "-framerate", fps,
        "-i", input_format,
        "-c:v", "libx264",
        "-pix_fmt", "yuv420p",
    ]
    if clip is not None:
        command += [
            "-start_number", str(clip.min),
            "-frames:v", str(clip.size),
        ]
    command.append(output_file)
    return _run_quiet(command)