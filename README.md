# qtwtheme

qtwtheme builds colour themes from a wallpaper image. It also models the state of a
button whose background colour and opacity animate on hover and on press.

## Installation

```
pip install qtwtheme
```

Pillow is installed along with it. It is used to read images and to capture the screen.

## Building a palette from a wallpaper

```python
from PIL import Image
from qtwtheme.monet import Monet

monet = Monet()
monet.set_wallpaper(Image.open("wallpaper.png"))
monet.generate()

print(monet.seed)
for accent, container in monet.palette():
    print(accent.name, container.name)
```

- `Monet.set_wallpaper(image)` stores the image, converted to RGBA. It can be read back
  through the `wallpaper` property.
- `Monet.grab_wallpaper()` captures the screen with Pillow's `ImageGrab` and uses the
  capture as the wallpaper. This needs a platform where `ImageGrab.grab()` works.
- `Monet.generate()` picks a seed colour from the wallpaper and stores it in `seed`. It
  then builds the palette from that seed.
- `Monet.palette()` returns a copy of the palette. Before `generate()` has run, the copy
  is an empty list.

The seed is the most vibrant pixel in the image. Only pixels that meet all of these
conditions are considered:

- alpha of at least 200
- HSV saturation of at least 0.35
- HSV value between 0.30 and 0.96

Each such pixel gets a score of `0.7 * saturation + 0.3 * value`. The pixel with the
highest score is the seed. When two pixels have the same score, the first one wins.

From the seed, five colour pairs are built:

1. the primary colour
2. a colour with the hue shifted by 30°
3. a colour with the hue shifted by 60°
4. the complementary colour (hue shifted by 180°)
5. a neutral, low-saturation colour

Each pair is a light accent colour followed by a dark container colour.

You can also run the two steps yourself:

```python
from qtwtheme.monet import extract_dominant_vibrant_color, generate_palette_from_seed

seed = extract_dominant_vibrant_color(image)
pairs = generate_palette_from_seed(seed)
```

## Colours

`qtwtheme.color.Color` is a frozen dataclass. It holds `red`, `green`, `blue` and
`alpha`, each an integer in 0–255. Alpha defaults to 255.

It has these members:

- `name` gives the colour as `#rrggbb`.
- `hsv()` returns `(hue, saturation, value)` as floats in [0, 1].
- `hsl()` returns `(hue, saturation, lightness)` as floats in [0, 1].
- `darker(factor=200)` divides the HSV value by `factor / 100`. A factor below 100
  lightens the colour instead. A factor of 0 or less returns the colour unchanged.

For grey colours, `hsv()` and `hsl()` return a hue of -1.

There are three constructors:

- `color_from_argb(value)` takes a packed `0xAARRGGBB` integer.
- `color_from_hsv(hue, saturation, value, alpha=1.0)` takes components in [0, 1].
- `color_from_hsl(hue, saturation, lightness, alpha=1.0)` takes components in [0, 1].

In the two component constructors, a hue of -1 means achromatic. A value out of range
raises `ValueError`.

## Animated button

`qtwtheme.button.AnimatedButton(base_color, text="")` holds the state of a button. It
does no drawing of its own.

Events come in through these methods:

- `enter()`
- `leave()`
- `press(button)`
- `release(button)`

The `button` argument is a `MouseButton`: `LEFT`, `RIGHT` or `MIDDLE`. Only `LEFT`
changes the opacity. Time moves on through `advance(elapsed_ms)`.

The animations work as follows:

- **Hover.** While the pointer is over the button, the background eases towards the
  hover colour, which is `base_color.darker(120)`. On `leave()` it eases back to the
  base colour.
- **Press.** Pressing the left button eases the opacity to 0.9. Releasing it eases the
  opacity back to 1.0.
- **Timing.** Both animations last 20 ms and use in-out quadratic easing.

The current state is kept in these attributes:

- `bg_color`
- `opacity`
- `hovered`
- `down`
- `corner_radius`, which is 6

Callables added to `bg_color_listeners` or `opacity_listeners` are called with the new
value whenever that value changes.

`PropertyAnimation(setter, duration_ms)` is the animation that drives each property. It
can be used on its own:

- `start(start_value, end_value)` starts the animation.
- `advance(elapsed_ms)` moves it forward.
- `stop()` stops it.

It interpolates numbers and `Color` values.

## Errors

`qtwtheme.errors.QtwError` is raised with an `ErrorCode`, found in its `code`
attribute. `error_message(code)` returns the text for a code. For an unknown code it
returns `"Undefined Exception: <code>"`.

`QtwError` is raised in these cases:

- **No image.** `extract_dominant_vibrant_color` gets an empty image or `None`.
- **No vibrant pixel.** No pixel in the image qualifies as the seed.
- **Bad seed.** `generate_palette_from_seed` gets something that is not a `Color`.
- **No wallpaper.** `Monet.generate()` is called before a wallpaper has been set.
- **Screen capture failed.** `Monet.grab_wallpaper()` cannot capture the screen.

Invalid colour components and negative animation durations raise `ValueError`.

## What it does not do

qtwtheme does not:

- render widgets or paint buttons
- apply window backdrop effects such as mica or blur

`ErrorCode` still lists codes for those operations, but nothing in the package raises
them.