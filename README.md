# turnthem

A small pygame arcade game. At the bottom of the window sits a deck of four
weapon cards, and you can drag them around with the mouse. The package also
has cannons that fire shells and a sweeping cannon that swings while it fires.
These can be used as separate game objects.

## Installing

```
pip install .
```

`pygame` is installed along with the package.

## Playing

```
turnthem
```

`turnthem --assets DIR` reads the images from `DIR`. The default is
`assets` in the current directory. That directory is expected to hold:

- `cannon_sprite_sheet.png`
- `scannon_sprite_sheet.png`
- `shell_projectile.png`
- `deck_sprite_sheet.png`

If an image is missing, an empty surface takes its place and the game still
starts.

The window is 520×800 and runs at 60 frames per second. Each of the deck's
four slots holds a card picked at random, either a cannon card or a sweeping
cannon card.

Dragging a card works like this:

- Press the left mouse button on a card to pick it up.
- While you drag it, the card follows the pointer as a half-transparent
  silhouette centred on the pointer.
- Release the card over the deck and it goes back to its slot.

To quit, close the window or press Escape.

## What the game does not do yet

Dropping a card on the play field does not place a weapon there. The card just
stays where you released it. The game window has no cannons, no targets and no
score. The cannon classes below work, but only when your own code creates them
and hands them a `fire` callback such as `Game.fire`.

## Using the pieces

Everything drawn on screen derives from `turnthem.render.GameObject`, which has
two methods:

- `update()` advances the object by one frame.
- `draw(surface)` renders the object onto a pygame surface.

`turnthem.render` also provides two drawing helpers:

- `draw_texture_rec(surface, texture, source, position, alpha)` draws part of a
  texture.
- `draw_texture_pro(surface, texture, source, dest, origin, rotation, alpha)`
  draws part of a texture scaled and rotated about a pivot.

The game objects:

- `turnthem.projectile.Projectile(sprite, pos, frame_dim, speed, angle)` moves
  at `speed` pixels per second in direction `angle` (degrees).
  - Its `update(dt)` takes the time step, which defaults to 1/60 s.
  - `is_out_of_bounds(screen_width, screen_height)` is true once the projectile
    is more than 50 pixels outside the screen.
- `turnthem.cannon.Cannon(..., fire, clock)` fires straight up, at speed 800,
  whenever half a second has passed on `clock`. After each shot it plays its
  animation once. `clock` defaults to a monotonic stopwatch.
- `turnthem.scannon.SCannon(..., fire)` turns one degree per frame back and
  forth between −45° and 45°. It fires a shell at speed 500 each time its
  animation completes a cycle. Its sweep direction is a
  `RotationDirection` (`CW` or `CCW`).
- `turnthem.weapon.WeaponCard` is a card with these members:
  - `is_point_inside(point)` tests whether a point lies on the card.
  - `set_xy(pos)` centres the silhouette on `pos`.
  - `dragging` selects which frame is drawn.
- `turnthem.game` has the following:
  - `Deck` holds the four cards. `update()` refills empty slots and
    `reset_card_position(slot_id)` puts a card back on its slot.
  - `Game(textures, screen_width, screen_height, rng)` ties everything
    together. `handle_mouse(pos, pressed, released)` advances the
    drag-and-drop state (`MouseState`). `fire(...)` launches a shell, unless
    the sprite is empty. `step(dt)` updates the objects and drops shells that
    have left the screen. `draw(surface)` renders the whole scene.
  - `load_textures(assets_dir)` loads the four images into a dict keyed by
    `cannon`, `scannon`, `shell` and `deck`.
  - `generate_weapon_card(sprite, pos, slot)` builds a 90×120 card.

## Running the tests

```
pip install ".[test]"
pytest
```