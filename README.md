# oscigraph

Draw pictures and text on an oscilloscope in XY mode. The two channels of a
stereo signal drive the X and Y deflection of the beam, so a stream of
`(x, y)` sample pairs becomes a picture on the screen.

The package has these parts:

- **Signals** (`oscigraph.signal`): subclasses of the abstract `Signal`, whose
  `generate()` method returns the next `(left, right)` sample pair. Iterating
  over a signal yields samples forever. `SAMPLE_RATE` is 48000 samples per
  second. `Square(frequency)` is a square wave of values -1.0 and 1.0, the
  same on both channels; `Silence()` always yields `(0.0, 0.0)`.
- **Line drawing** (`oscigraph.linedraw`): `Drawer(lines)` turns a list of
  polylines into a signal that moves the beam towards each point in turn, at
  most `DRAW_RATE` (0.007) per sample, jumps to the start of the next line when
  a line is finished, and starts over after the last line. It raises
  `ValueError` if there are no lines or a line has no points.
- **VGDL** (`oscigraph.vgdl`, `oscigraph.commands`, `oscigraph.errors`): a
  small vector graphics description language whose programs evaluate to
  lines that a `Drawer` can play.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite with pytest.

## Quick start

```python
from oscigraph.vgdl import State
from oscigraph.linedraw import Drawer

state = State()
lines = state.run("draw -0.5 -0.5 0.5 -0.5 0.5 0.5 -0.5 0.5 -0.5 -0.5 ;")
drawer = Drawer(lines)

samples = [drawer.generate() for _ in range(48000)]  # one second of samples
```

Feed the samples to a stereo audio output of your choice, left channel to X
and right channel to Y.

## The VGDL language

A program is a sequence of words separated by ASCII whitespace. Each command
reads the words it needs and yields a list of lines, each line being a list
of `(x, y)` points. `State.run(program)` runs exactly one command and returns
its lines; `State.exec(args)` runs the command named by the next word of a
`collections.deque` of words and leaves the rest in it.

| Command | Form | Result |
| --- | --- | --- |
| `draw` | `draw x y x y … , x y x y … ;` | Literal lines. `,` ends a line, `;` ends the last line and the command. Every line needs at least two points. |
| `define` | `define NAME command` | Binds `NAME` to the lines the command produces (a `Binding`) and yields nothing. Afterwards `NAME` is itself a command that takes no words. |
| `sequence` | `sequence command … .` | All the lines of the commands, in order. |
| `scale` | `scale XS YS command` | The command's lines with x multiplied by `XS` and y by `YS`. |
| `move` | `move XO YO command` | The command's lines shifted by `(XO, YO)`. |
| `row` | `row command … .` | The commands laid out left to right: the first shifted by 0.5 in x, each next one 2 further. |
| `col` | `col command … .` | The same, stacked in y. |
| `text` | `text word … .` | Each character is run as the command of that name (define glyphs first) and placed 2 apart in x, with an extra gap of 2 between words. |
| `load` | `load PATH` | Runs the program in a UTF-8 file; for a directory, every file below it, in sorted order, joining their lines. |

The built-in commands are plain functions in `oscigraph.commands` and live in
`State.env`, a dictionary from names to commands, next to any definitions.

### Example

```python
from oscigraph.vgdl import State

state = State()
state.run("define I draw 0 -1 0 1 , ;")
state.run("define L draw -0.5 1 -0.5 -1 0.5 -1 ;")
lines = state.run("scale 0.2 0.2 text LI IL .")
```

Definitions live in the `State`, so a file loaded with `load` can define
glyphs that later programs use.

## Errors

Every failure while running a program raises `oscigraph.errors.VgdlError`:
an unknown command, a missing or unparsable number, a line with fewer than
two points, a missing `.` or `;`, words left over after the command, or a
file that cannot be read. Each command the error passed through adds its own
context, and `str()` of the error shows the whole chain, outermost first, for
example `In command scale: Cannot parse X scale: …`.

## What it does not do

The package only produces samples. It does not open an audio device or play
anything, and it has no command-line program; sending the samples of a
`Drawer` to a sound card, and reloading a drawing when it changes, is left to
the caller.