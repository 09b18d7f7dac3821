# tracer

A small path tracer in pure Python. It renders scenes made of spheres with
diffuse, metal and glass materials. A positionable camera with optional depth
of field produces the image, which is written as plain-text PPM (P3).

## Installation

```
pip install .
```

No third-party libraries are needed at run time. To run the tests, install the
`test` extra (`pip install .[test]`) and run `pytest`.

## Rendering the demo scene

```
tracer
```

This builds the demo world with `tracer.scene.build_world()`. The world has a
large grey ground sphere and a 22 × 22 grid of small spheres at random positions.
Each small sphere is given a diffuse, metal or glass material at random, and
spheres within 0.9 of the point (4, 0.2, 0) are left out. Three large spheres
(glass, diffuse and metal) complete the scene. The camera settings come from
`tracer.scene.build_camera()`: a 16:9 image 1200 pixels wide, 500 samples per
pixel, at most 50 bounces, a 20° vertical field of view, a view from (13, 2, 3)
towards the origin, a 0.6° defocus angle and a focus distance of 10.

Options:

- `--output PATH`: the PPM file to write. The default is `renders/image.ppm`.
  The directory must already exist.
- `--image-width N`: the image width in pixels. The height follows from the 16:9
  aspect ratio.
- `--samples-per-pixel N`: the number of random samples averaged per pixel.
- `--max-depth N`: the maximum number of bounces per ray.

While rendering, the command prints `Progress: row/height` once per image row.
It prints `Rendering complete, writing to file...` before it writes the image.
At the default settings a full render in pure Python takes a very long time. A
quick preview can be made with, for example:

```
tracer --image-width 200 --samples-per-pixel 10 --max-depth 10 --output preview.ppm
```

## Using the library

```python
from tracer.vec3 import Vec3
from tracer.material import Lambertian, Metal, Dielectric
from tracer.sphere import Sphere
from tracer.hittable_list import HittableList
from tracer.camera import Camera

world = HittableList()
world.add(Sphere(Vec3(0.0, -100.5, -1.0), 100.0, Lambertian(Vec3(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0.0, 0.0, -1.2), 0.5, Lambertian(Vec3(0.1, 0.2, 0.5))))
world.add(Sphere(Vec3(-1.0, 0.0, -1.0), 0.5, Dielectric(1.5)))
world.add(Sphere(Vec3(1.0, 0.0, -1.0), 0.5, Metal(Vec3(0.8, 0.6, 0.2), 1.0)))

camera = Camera(aspect_ratio=16.0 / 9.0, image_width=200,
                samples_per_pixel=10, max_depth=10)

camera.render(world, "image.ppm")    # write to a file, printing progress
ppm_text = camera.render_ppm(world)  # or keep the PPM text in memory
```

`aspect_ratio`, `image_width` and `samples_per_pixel` must be set to positive
values before rendering; otherwise `Camera.initialize()` raises `ValueError`.
The other settings have defaults:

| Setting | Default |
| --- | --- |
| `max_depth` | 10 |
| `vfov` | 90° |
| `lookfrom` | the origin |
| `lookat` | (0, 0, −1) |
| `vup` | (0, 1, 0) |
| `defocus_angle` | 0, which gives a pinhole camera with no depth of field |
| `focus_dist` | 10 |

### Building blocks

- `tracer.vec3`
  - `Vec3` is an immutable vector. It supports `+`, `-`, unary `-`,
    multiplication by a scalar or component-wise by another `Vec3`, and division
    by a scalar. It has `mag`, `normalize`, `dot`, `cross` and `near_zero`.
  - Helpers: `reflect`, `refract`, `degrees_to_radians`, `random_float` (a value
    in [0, 1] in steps of 0.001), `random_float_interval`, `random_vec3`,
    `random_range_vec3`, `random_unit_vector`, `random_on_hemisphere` and
    `random_in_unit_disk`.
- `tracer.ray`: `Ray(origin, direction)`. Its `at(t)` method gives the point
  `origin + t·direction`.
- `tracer.interval`
  - `Interval(min, max)` has `size`, `contains` (closed), `surrounds` (open) and
    `clamp`.
  - `world_choice(IntervalWorldChoice.EMPTY | IntervalWorldChoice.UNIVERSE)`
    returns the empty interval or the whole real line.
- `tracer.color`
  - `linear_to_gamma` takes a square root and maps values that are not positive
    to 0.
  - `write_color(Vec3)` gamma-corrects a colour, clamps it and formats it as an
    `"r g b\n"` line of 0–255 values. The green value is taken from the
    colour's `z` component, the same component as blue.
- `tracer.hittable`
  - `Hittable` is the abstract base class. Its `hit(ray, interval)` returns a
    `HitRecord`, or `None` on a miss.
  - `HitRecord` holds `t`, `point`, `normal`, `front_face` and `mat`.
- `tracer.material`
  - Each material's `scatter(ray_in, hit_record)` returns
    `(attenuation, scattered_ray)`, or `None` when the ray is absorbed.
  - The materials are `Lambertian(albedo)`, `Metal(albedo, fuzz)` (fuzz is
    capped at 1), `Dielectric(refraction_index)` and `DefaultMaterial`, which
    absorbs every ray.
  - `reflectance` is Schlick's approximation.
- `tracer.sphere`
  - `Sphere(center, radius, mat)` is a sphere that rays can hit.
  - `hit_sphere(center, radius, ray)` returns a distance along the normalised
    ray, or -1.0 on a miss.
- `tracer.hittable_list`: `HittableList` holds several objects and supports
  `add`, `clear`, `len()` and iteration. Its `hit` returns the nearest hit.
- `tracer.camera`
  - `Camera` provides `initialize`, `get_ray`, `ray_color`, `render_ppm` and
    `render`.
  - `write_to_file(filename, data)` writes a text file.
- `tracer.scene`: `build_world()`, `build_camera()` and `main(argv=None)`, which
  is the `tracer` command.

## Limitations

- Spheres are the only shapes.
- Scenes are built in Python code; there is no scene file format.
- PPM (P3) text is the only output format.
- Rendering runs in a single thread with no acceleration structure, so large
  images are slow.