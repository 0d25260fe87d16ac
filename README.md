# elbowengine

This library provides the platform and resource layer of a small game engine. It holds the
graphics enumerations and their Vulkan values, descriptions of images and image views,
platform settings, the registry of graphics contexts and windows, helpers for project-relative
files, and an SQLite asset database whose tables are built from dataclasses.

## Modules

- `elbowengine.enums` holds `Format`, `ColorSpace`, `PresentMode`, `GraphicsAPI`,
  `SampleCount`, `ImageViewType` and `ComponentMappingElement`. The flag types are
  `ImageAspect`, `BufferUsage` and `BufferMemoryProperty`. The dataclass
  `ImageSubresourceRange` uses -1 to mean "take this from the image".
- `elbowengine.vulkan_enums` converts in both directions between these enums and the numeric
  Vulkan constants. Examples are `format_to_vk`, `vk_to_format`, `present_mode_to_vk`,
  `sample_count_to_vk`, `image_aspect_to_vk`, `buffer_usage_to_vk`, `memory_property_to_vk`
  and `component_mapping_to_vk`. An unknown value maps to the `COUNT` member or to the
  Vulkan `MAX_ENUM` / `UNDEFINED` value.
- `elbowengine.image` holds the abstract `Resource`, with `native_handle()` and
  `is_valid()`. It also holds `Buffer`, `BufferCreateInfo`, `Surface`, `ImageState`,
  `ImageUsage`, `ImageDimension`, `ImageDesc` (whose `ImageDesc.default()` is a placeholder)
  and `Image`.
- `elbowengine.image_view` holds `ComponentMapping`, `ImageViewDesc` and `ImageView`.
  `ImageViewDesc` fills in the fields it was not given:
  - the view type comes from the image's dimension;
  - the format comes from the image;
  - the layer count is forced to 6 for cube views and to 1 for non-array views;
  - the level count comes from the image's mip levels.

  It raises `ImageViewError` when any of these is true:
  - there is no image;
  - an array view has no layer count;
  - the aspect mask is missing.

  `ImageViewDesc.from_aspect_mask(name, image, aspect_mask)` gives only the aspects and
  fills in the rest.
- `elbowengine.config` holds `PlatformConfig`. Its defaults are a Vulkan graphics API, the
  GLFW window library, a 1920×1080 window, VSync, two swapchain images, the validation
  layer turned on, and the `VK_KHR_swapchain` device extension. The module also holds
  `Size2D`, `WindowLib` and `WindowFlag`.
- `elbowengine.gfx_context` holds the abstract `GfxContext` and the device-query
  dataclasses. These are `SurfaceFormat`, `SwapChainSupportInfo`, `PhysicalDeviceFeature`,
  `DeviceLimits` and `PhysicalDeviceInfo`. The active context is managed with these
  functions:
  - `register_backend(api, factory)`;
  - `use_graphics_api(api, config=None)`;
  - `get_gfx_context()`;
  - `release_gfx_context()`.

  Callbacks can be appended to these lists:
  - `on_pre_initialized`;
  - `on_post_initialized`;
  - `on_pre_destroyed`;
  - `on_post_destroyed`.

  A failure raises `RHIException`.
- `elbowengine.filesystem` handles the project path, paths, files and folders.
  - `set_project_path(path)` accepts only a folder that is empty or holds a `.elbowengine`
    file. It makes that folder the working directory and calls each function in
    `on_project_path_set`.
  - The path functions are `get_project_path()`, `combine`, `is_exist`, `is_folder` and
    `get_parent`.
  - The folder functions are `is_folder_empty`, `list_files`, `list_files_regex`,
    `list_files_filter`, `contains_file`, `create_folder` and `create_file`.
  - The `File` and `Folder` classes take paths relative to the project folder.
  - A failure raises `FileSystemError`.
- `elbowengine.window` holds the abstract `Window` and `WindowManager`. The manager keys
  windows by id and refuses a duplicate title by raising `WindowError`. The window with id 0
  is `main_window`. Backends are plugged in with `register_window_backend(window_lib,
  factory)`. `create_window(manager, ...)` takes its missing values from the application
  name and from `PlatformConfig`.
- `elbowengine.sql_helper` maps dataclasses onto SQLite tables.
  - A row type is marked with `@sql_table(name)`, and its columns with
    `sql_field(default, primary_key, nullable, manual_primary_key)`.
  - `initialize_database(db)` creates the `__TYPE_META__` table.
  - `create_table(db, row_type, allow_exist)` creates a table and returns it as an
    `SQLTable`, which has `insert` and `query`.
  - A failure raises `SQLException`.
- `elbowengine.mesh_meta` holds `MeshMeta`, the mesh import settings. Its rows are stored
  in the table `Mesh`.
- `elbowengine.project` holds `Project`, which has `name`, `path`, `version` and
  `database_path`. Its methods are:
  - `Project.load(path)`, which reads the `.elbowengine` marker file in the folder. An empty
    marker gets a new project's defaults written into it.
  - `to_yaml()` and `from_yaml(text)`.

  The module also has `create_instance(path)` and `get_current_project()`. A failure raises
  `ProjectError`.
- `elbowengine.asset_database` holds `AssetDatabase`.
  - It opens `AssetDataBase.db` inside the project's database folder.
  - It creates the meta tables.
  - It offers `table`, `query_meta` and `query_meta_by_handle`.
  - It can be used as a context manager that runs `startup()` and `shutdown()`.
- `elbowengine.asset` holds `AssetType`, whose members have display labels, the abstract
  `Asset`, `MeshStorage` and `Mesh`. `Mesh.perform_load()` looks up the mesh's `MeshMeta`
  by handle and checks that its file exists. If the meta row is missing it raises
  `LookupError`; if the file is missing it raises `FileNotFoundError`.

## Installation

```
pip install .
```

## Example: an asset table

```python
import sqlite3
from elbowengine.sql_helper import initialize_database, create_table
from elbowengine.mesh_meta import MeshMeta

db = sqlite3.connect(":memory:")
initialize_database(db)
table = create_table(db, MeshMeta, True)
table.insert(MeshMeta(object_handle=7, path="Models/cube.fbx"))
rows = table.query(MeshMeta, "object_handle = 7")
print(rows[0].path)
```

## Example: mapping to Vulkan values

```python
from elbowengine.enums import Format
from elbowengine.vulkan_enums import format_to_vk, vk_to_format

vk_value = format_to_vk(Format.B8G8R8A8_SRGB)
assert vk_to_format(vk_value) is Format.B8G8R8A8_SRGB
```

## What it does not do

- It does not include a graphics backend. `GfxContext` is abstract, so no Vulkan device,
  swapchain or GPU buffer is ever created. A backend has to be registered with
  `register_backend` before `use_graphics_api` can succeed.
- It does not include a window backend. `Window` is abstract, so no native window is
  opened. Register a factory with `register_window_backend` first.
- It has no engine main loop and installs no command.
- `Mesh.perform_load()` checks the metadata and the source file, but it does not read mesh
  data or fill `MeshStorage`.

## Running the tests

```
pip install .[test]
pytest
```