# mediatools

Small building blocks for working with video frames, floating-point images
and the terminal.

## Installation

```
pip install .
```

The frame helpers call `ffmpeg` and `ffprobe`, so both must be installed and
on your `PATH`. The terminal helpers use `termios` and therefore need a POSIX
system.

## Video frames (`mediatools.frames`)

```python
from mediatools.frames import (
    MinSize,
    count_frames,
    frames_per_second,
    extract_frames,
    assemble_video,
    frame_pattern,
)

count = count_frames("clip.mp4")        # frames in the first video stream
rate = frames_per_second("clip.mp4")    # FrameRate(numerator=..., denominator=...)

# Crop a 640x360 region starting at (100, 50) and write the first `count`
# frames as JPEG files named out_0001.jpg, out_0002.jpg, ...
status = extract_frames("clip.mp4", "out", count, (MinSize(100, 640), MinSize(50, 360)))

# Encode the numbered frames into an H.264 video (yuv420p), overwriting
# result.mp4. The optional clip selects 120 frames starting at number 10.
status = assemble_video("out", "result.mp4", "30", count, MinSize(10, 120))

frame_pattern("out", 1500)              # "out_%04d.jpg"
```

- `MinSize(min, size)` describes a span by its start and its length.
- `frame_pattern(prefix, frame_count)` pads the frame number to as many digits
  as `frame_count` has; it raises `ValueError` when `frame_count` is below 1.
- `count_frames` and `frames_per_second` raise `FrameToolError` when `ffprobe`
  cannot be started, its output is not UTF-8, or the output is not an
  unsigned 32-bit number (or, for the frame rate, a `numerator/denominator`
  pair of such numbers).
- `extract_frames` and `assemble_video` run `ffmpeg` with all of its output
  discarded and return its exit code; they do not raise on a non-zero code.

## Floating-point pixels (`mediatools.pixels`)

```python
from mediatools.pixels import Dimensions, read_f32, write_f32

dimensions, pixels = read_f32("photo.png")   # flat RGBA values in 0.0..1.0
write_f32(dimensions, pixels, "copy.jpg")    # saved as JPEG
```

`read_f32` converts any image Pillow can open to RGBA and returns a
`Dimensions(width, height)` together with a list of `width * height * 4`
floats. `write_f32` clamps every value to `0.0..1.0` (NaN becomes 0), drops
the alpha channel and saves a JPEG. It raises `DimensionsError` (a
`ValueError`) when there are fewer than `width * height * 4` values; any
extra values are ignored.

## Terminal (`mediatools.terminal`)

```python
import sys
from mediatools.terminal import RawMode, set_cursor, fg, bg, CLEAR, LN, RESET

with RawMode():
    sys.stdout.write(CLEAR + set_cursor(1, 1) + fg(255, 200, 0) + bg(0, 0, 64))
    sys.stdout.write("hello" + RESET + LN)
    sys.stdout.flush()
```

`RawMode` puts standard input into raw mode on entry and restores the saved
settings on exit. `enable_raw_mode` and `disable_raw_mode` do the same as
plain functions; when standard input is not a terminal, `enable_raw_mode`
leaves it untouched. `set_cursor`, `fg` and `bg` return ANSI escape
sequences for cursor placement and 24-bit foreground and background colours;
`CLEAR`, `LN` and `RESET` clear the screen, end a line in raw mode and reset
attributes.

## What this package does not do

It is a library only: it installs no command-line program. It does not play
audio, open windows or draw with a GPU, and it does not decode or encode
video itself — that work is left to `ffmpeg`.

## Running the tests

```
pip install .[test]
pytest
```