"""Core : PropertyBag + catalogues."""
from .property_bag import (
    PropertyBag,
    BorderValue,
    ShadowValue,
    GradientStop,
    GradientValue,
    overlay,
    set_property,
    without,
    is_empty,
    changed_keys,
)
from .catalog import (
    PropertySpec,
    EFFECT_PROPERTIES,
    EASING_VALUES,
    TRANSFORM_ORIGINS,
    is_known_property,
    get_property_spec,
    get_property_default,
    get_easing_css,
    get_transform_origin_css,
)

__all__ = [
    "PropertyBag", "BorderValue", "ShadowValue", "GradientStop", "GradientValue",
    "overlay", "set_property", "without", "is_empty", "changed_keys",
    "PropertySpec", "EFFECT_PROPERTIES", "EASING_VALUES", "TRANSFORM_ORIGINS",
    "is_known_property", "get_property_spec", "get_property_default",
    "get_easing_css", "get_transform_origin_css",
]
