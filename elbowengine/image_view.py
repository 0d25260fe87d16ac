"""Image view descriptions and the image view resource."""

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

from elbowengine.enums import (
    ComponentMappingElement,
    Format,
    ImageSubresourceRange,
    ImageViewType,
)
from elbowengine.image import Image, ImageDimension, Resource


class ImageViewError(ValueError):
    """An image view description cannot be completed."""


@dataclass
class ComponentMapping:
    """Where each colour channel of a view reads from."""

    r: ComponentMappingElement = ComponentMappingElement.IDENTITY
    g: ComponentMappingElement = ComponentMappingElement.IDENTITY
    b: ComponentMappingElement = ComponentMappingElement.IDENTITY
    a: ComponentMappingElement = ComponentMappingElement.IDENTITY


_VIEW_TYPE_FOR_DIMENSION = {
    ImageDimension.D1: ImageViewType.D1,
    ImageDimension.D2: ImageViewType.D2,
    ImageDimension.D3: ImageViewType.D3,
    ImageDimension.CUBE: ImageViewType.CUBE,
    ImageDimension.ARRAY_1D: ImageViewType.ARRAY_1D,
    ImageDimension.ARRAY_2D: ImageViewType.ARRAY_2D,
    ImageDimension.ARRAY_CUBE: ImageViewType.ARRAY_CUBE,
}

_ARRAY_VIEW_TYPES = (
    ImageViewType.ARRAY_1D,
    ImageViewType.ARRAY_2D,
    ImageViewType.ARRAY_CUBE,
)


@dataclass
class ImageViewDesc:
    """Description of a view onto an image.

    Unset values (``COUNT`` or -1) are filled in from the image where possible.
    """

    name: str
    image: Optional[Image]
    view_type: ImageViewType = ImageViewType.COUNT
    format: Format = Format.COUNT
    subresource_range: ImageSubresourceRange = field(
        default_factory=ImageSubresourceRange
    )
    component_mapping: ComponentMapping = field(default_factory=ComponentMapping)

    def __post_init__(self):
        if self.image is None:
            raise ImageViewError("Image cannot be None when creating an image view.")
        self.subresource_range = dataclasses.replace(self.subresource_range)
        if self.view_type == ImageViewType.COUNT:
            try:
                self.view_type = _VIEW_TYPE_FOR_DIMENSION[self.image.dimension]
            except KeyError:
                raise ImageViewError("Unknown image view type.") from None
        if self.format == Format.COUNT:
            self.format = self.image.format

        subrange = self.subresource_range
        if self.view_type == ImageViewType.CUBE:
            subrange.layer_count = 6
        elif self.view_type in _ARRAY_VIEW_TYPES:
            if subrange.layer_count == -1:
                raise ImageViewError(
                    "layer_count must be specified when creating an array image view."
                )
        else:
            subrange.layer_count = 1
        if subrange.level_count == -1:
            subrange.level_count = self.image.mip_levels
        if subrange.aspect_mask == -1:
            raise ImageViewError(
                "aspect_mask must be specified when creating an image view."
            )

    @classmethod
    def from_aspect_mask(cls, name, image, aspect_mask):
        """A description that only names the aspects; the rest comes from the image."""
        return cls(name, image, subresource_range=ImageSubresourceRange(int(aspect_mask)))


class ImageView(Resource):
    """A view onto an image."""

    def __init__(self, desc):
        self.desc = desc

    @property
    def image(self):
        return self.desc.image

    @property
    def view_type(self):
        return self.desc.view_type

    @property
    def format(self):
        return self.desc.format

    @property
    def subresource_range(self):
        return self.desc.subresource_range

    @property
    def component_mapping(self):
        return self.desc.component_mapping