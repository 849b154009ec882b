"""Static HTML/SVG attribute and tag name tables.

The platform tables mirror React's DOM property configs: each entry is a JSX
prop name, optionally paired with the DOM attribute it is written as. When no
DOM attribute name is declared the attribute is the lower-cased prop name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class PropertyConfig:
    name: str
    properties: Tuple[str, ...]
    dom_attribute_names: Mapping[str, str] = field(default_factory=dict)

    def attribute_pairs(self) -> Iterable[Tuple[str, str]]:
        """Yield ``(attribute, prop)`` pairs in declaration order."""
        for prop in self.properties:
            attribute = self.dom_attribute_names.get(prop) or prop.lower()
            yield attribute, prop


HTML_PROPERTY_CONFIG = PropertyConfig(
    name="html",
    properties=(
        "accept", "acceptCharset", "accessKey", "action", "allowFullScreen",
        "allowTransparency", "alt", "as", "async", "autoComplete", "autoPlay",
        "capture", "cellPadding", "cellSpacing", "charSet", "challenge",
        "checked", "cite", "classID", "className", "cols", "colSpan", "content",
        "contentEditable", "contextMenu", "controls", "controlsList", "coords",
        "crossOrigin", "data", "dateTime", "default", "defer", "dir", "disabled",
        "download", "draggable", "encType", "form", "formAction", "formEncType",
        "formMethod", "formNoValidate", "formTarget", "frameBorder", "headers",
        "height", "hidden", "high", "href", "hrefLang", "htmlFor", "httpEquiv",
        "icon", "id", "inputMode", "integrity", "is", "keyParams", "keyType",
        "kind", "label", "lang", "list", "loop", "low", "manifest",
        "marginHeight", "marginWidth", "max", "maxLength", "media", "mediaGroup",
        "method", "min", "minLength", "multiple", "muted", "name", "nonce",
        "noValidate", "open", "optimum", "pattern", "placeholder", "playsInline",
        "poster", "preload", "profile", "radioGroup", "readOnly",
        "referrerPolicy", "rel", "required", "reversed", "role", "rows",
        "rowSpan", "sandbox", "scope", "scoped", "scrolling", "seamless",
        "selected", "shape", "size", "sizes", "span", "spellCheck", "src",
        "srcDoc", "srcLang", "srcSet", "start", "step", "style", "summary",
        "tabIndex", "target", "title", "type", "useMap", "value", "width",
        "wmode", "wrap",
        # RDFa
        "about", "datatype", "inlist", "prefix", "property", "resource",
        "typeof", "vocab",
        # non-standard
        "autoCapitalize", "autoCorrect", "autoSave", "color", "itemProp",
        "itemScope", "itemType", "itemID", "itemRef", "results", "security",
        "unselectable",
    ),
    dom_attribute_names={
        "acceptCharset": "accept-charset",
        "className": "class",
        "htmlFor": "for",
        "httpEquiv": "http-equiv",
    },
)

SVG_PROPERTY_CONFIG = PropertyConfig(
    name="svg",
    properties=(
        "accentHeight", "accumulate", "additive", "alignmentBaseline",
        "allowReorder", "alphabetic", "amplitude", "arabicForm", "ascent",
        "attributeName", "attributeType", "autoReverse", "azimuth",
        "baseFrequency", "baseProfile", "baselineShift", "bbox", "begin", "bias",
        "by", "calcMode", "capHeight", "clip", "clipPath", "clipRule",
        "clipPathUnits", "colorInterpolation", "colorInterpolationFilters",
        "colorProfile", "colorRendering", "contentScriptType",
        "contentStyleType", "cursor", "cx", "cy", "d", "decelerate", "descent",
        "diffuseConstant", "direction", "display", "divisor", "dominantBaseline",
        "dur", "dx", "dy", "edgeMode", "elevation", "enableBackground", "end",
        "exponent", "externalResourcesRequired", "fill", "fillOpacity",
        "fillRule", "filter", "filterRes", "filterUnits", "floodColor",
        "floodOpacity", "focusable", "fontFamily", "fontSize", "fontSizeAdjust",
        "fontStretch", "fontStyle", "fontVariant", "fontWeight", "format",
        "from", "fx", "fy", "g1", "g2", "glyphName",
        "glyphOrientationHorizontal", "glyphOrientationVertical", "glyphRef",
        "gradientTransform", "gradientUnits", "hanging", "horizAdvX",
        "horizOriginX", "ideographic", "imageRendering", "in", "in2",
        "intercept", "k", "k1", "k2", "k3", "k4", "kernelMatrix",
        "kernelUnitLength", "kerning", "keyPoints", "keySplines", "keyTimes",
        "lengthAdjust", "letterSpacing", "lightingColor", "limitingConeAngle",
        "local", "markerEnd", "markerMid", "markerStart", "markerHeight",
        "markerUnits", "markerWidth", "mask", "maskContentUnits", "maskUnits",
        "mathematical", "mode", "numOctaves", "offset", "opacity", "operator",
        "order", "orient", "orientation", "origin", "overflow",
        "overlinePosition", "overlineThickness", "paintOrder", "panose1",
        "pathLength", "patternContentUnits", "patternTransform", "patternUnits",
        "pointerEvents", "points", "pointsAtX", "pointsAtY", "pointsAtZ",
        "preserveAlpha", "preserveAspectRatio", "primitiveUnits", "r", "radius",
        "refX", "refY", "renderingIntent", "repeatCount", "repeatDur",
        "requiredExtensions", "requiredFeatures", "restart", "result", "rotate",
        "rx", "ry", "scale", "seed", "shapeRendering", "slope", "spacing",
        "specularConstant", "specularExponent", "speed", "spreadMethod",
        "startOffset", "stdDeviation", "stemh", "stemv", "stitchTiles",
        "stopColor", "stopOpacity", "strikethroughPosition",
        "strikethroughThickness", "string", "stroke", "strokeDasharray",
        "strokeDashoffset", "strokeLinecap", "strokeLinejoin",
        "strokeMiterlimit", "strokeOpacity", "strokeWidth", "surfaceScale",
        "systemLanguage", "tableValues", "targetX", "targetY", "textAnchor",
        "textDecoration", "textRendering", "textLength", "to", "transform",
        "u1", "u2", "underlinePosition", "underlineThickness", "unicode",
        "unicodeBidi", "unicodeRange", "unitsPerEm", "vAlphabetic", "vHanging",
        "vIdeographic", "vMathematical", "values", "vectorEffect", "version",
        "vertAdvY", "vertOriginX", "vertOriginY", "viewBox", "viewTarget",
        "visibility", "widths", "wordSpacing", "writingMode", "x", "xHeight",
        "x1", "x2", "xChannelSelector", "xlinkActuate", "xlinkArcrole",
        "xlinkHref", "xlinkRole", "xlinkShow", "xlinkTitle", "xlinkType",
        "xmlBase", "xmlns", "xmlnsXlink", "xmlLang", "xmlSpace", "y", "y1",
        "y2", "yChannelSelector", "z", "zoomAndPan",
    ),
    dom_attribute_names={
        "accentHeight": "accent-height",
        "alignmentBaseline": "alignment-baseline",
        "allowReorder": "allowReorder",
        "arabicForm": "arabic-form",
        "attributeName": "attributeName",
        "attributeType": "attributeType",
        "autoReverse": "autoReverse",
        "baseFrequency": "baseFrequency",
        "baseProfile": "baseProfile",
        "baselineShift": "baseline-shift",
        "calcMode": "calcMode",
        "capHeight": "cap-height",
        "clipPath": "clip-path",
        "clipRule": "clip-rule",
        "clipPathUnits": "clipPathUnits",
        "colorInterpolation": "color-interpolation",
        "colorInterpolationFilters": "color-interpolation-filters",
        "colorProfile": "color-profile",
        "colorRendering": "color-rendering",
        "contentScriptType": "contentScriptType",
        "contentStyleType": "contentStyleType",
        "diffuseConstant": "diffuseConstant",
        "dominantBaseline": "dominant-baseline",
        "edgeMode": "edgeMode",
        "enableBackground": "enable-background",
        "externalResourcesRequired": "externalResourcesRequired",
        "fillOpacity": "fill-opacity",
        "fillRule": "fill-rule",
        "filterRes": "filterRes",
        "filterUnits": "filterUnits",
        "floodColor": "flood-color",
        "floodOpacity": "flood-opacity",
        "fontFamily": "font-family",
        "fontSize": "font-size",
        "fontSizeAdjust": "font-size-adjust",
        "fontStretch": "font-stretch",
        "fontStyle": "font-style",
        "fontVariant": "font-variant",
        "fontWeight": "font-weight",
        "glyphName": "glyph-name",
        "glyphOrientationHorizontal": "glyph-orientation-horizontal",
        "glyphOrientationVertical": "glyph-orientation-vertical",
        "glyphRef": "glyphRef",
        "gradientTransform": "gradientTransform",
        "gradientUnits": "gradientUnits",
        "horizAdvX": "horiz-adv-x",
        "horizOriginX": "horiz-origin-x",
        "imageRendering": "image-rendering",
        "kernelMatrix": "kernelMatrix",
        "kernelUnitLength": "kernelUnitLength",
        "keyPoints": "keyPoints",
        "keySplines": "keySplines",
        "keyTimes": "keyTimes",
        "lengthAdjust": "lengthAdjust",
        "letterSpacing": "letter-spacing",
        "lightingColor": "lighting-color",
        "limitingConeAngle": "limitingConeAngle",
        "markerEnd": "marker-end",
        "markerMid": "marker-mid",
        "markerStart": "marker-start",
        "markerHeight": "markerHeight",
        "markerUnits": "markerUnits",
        "markerWidth": "markerWidth",
        "maskContentUnits": "maskContentUnits",
        "maskUnits": "maskUnits",
        "numOctaves": "numOctaves",
        "overlinePosition": "overline-position",
        "overlineThickness": "overline-thickness",
        "paintOrder": "paint-order",
        "panose1": "panose-1",
        "pathLength": "pathLength",
        "patternContentUnits": "patternContentUnits",
        "patternTransform": "patternTransform",
        "patternUnits": "patternUnits",
        "pointerEvents": "pointer-events",
        "pointsAtX": "pointsAtX",
        "pointsAtY": "pointsAtY",
        "pointsAtZ": "pointsAtZ",
        "preserveAlpha": "preserveAlpha",
        "preserveAspectRatio": "preserveAspectRatio",
        "primitiveUnits": "primitiveUnits",
        "refX": "refX",
        "refY": "refY",
        "renderingIntent": "rendering-intent",
        "repeatCount": "repeatCount",
        "repeatDur": "repeatDur",
        "requiredExtensions": "requiredExtensions",
        "requiredFeatures": "requiredFeatures",
        "shapeRendering": "shape-rendering",
        "specularConstant": "specularConstant",
        "specularExponent": "specularExponent",
        "spreadMethod": "spreadMethod",
        "startOffset": "startOffset",
        "stdDeviation": "stdDeviation",
        "stitchTiles": "stitchTiles",
        "stopColor": "stop-color",
        "stopOpacity": "stop-opacity",
        "strikethroughPosition": "strikethrough-position",
        "strikethroughThickness": "strikethrough-thickness",
        "strokeDasharray": "stroke-dasharray",
        "strokeDashoffset": "stroke-dashoffset",
        "strokeLinecap": "stroke-linecap",
        "strokeLinejoin": "stroke-linejoin",
        "strokeMiterlimit": "stroke-miterlimit",
        "strokeOpacity": "stroke-opacity",
        "strokeWidth": "stroke-width",
        "surfaceScale": "surfaceScale",
        "systemLanguage": "systemLanguage",
        "tableValues": "tableValues",
        "targetX": "targetX",
        "targetY": "targetY",
        "textAnchor": "text-anchor",
        "textDecoration": "text-decoration",
        "textRendering": "text-rendering",
        "textLength": "textLength",
        "underlinePosition": "underline-position",
        "underlineThickness": "underline-thickness",
        "unicodeBidi": "unicode-bidi",
        "unicodeRange": "unicode-range",
        "unitsPerEm": "units-per-em",
        "vAlphabetic": "v-alphabetic",
        "vHanging": "v-hanging",
        "vIdeographic": "v-ideographic",
        "vMathematical": "v-mathematical",
        "vectorEffect": "vector-effect",
        "vertAdvY": "vert-adv-y",
        "vertOriginX": "vert-origin-x",
        "vertOriginY": "vert-origin-y",
        "viewBox": "viewBox",
        "viewTarget": "viewTarget",
        "wordSpacing": "word-spacing",
        "writingMode": "writing-mode",
        "xHeight": "x-height",
        "xChannelSelector": "xChannelSelector",
        "xlinkActuate": "xlink:actuate",
        "xlinkArcrole": "xlink:arcrole",
        "xlinkHref": "xlink:href",
        "xlinkRole": "xlink:role",
        "xlinkShow": "xlink:show",
        "xlinkTitle": "xlink:title",
        "xlinkType": "xlink:type",
        "xmlBase": "xml:base",
        "xmlnsXlink": "xmlns:xlink",
        "xmlLang": "xml:lang",
        "xmlSpace": "xml:space",
        "yChannelSelector": "yChannelSelector",
        "zoomAndPan": "zoomAndPan",
    },
)

PLATFORM_PROPERTY_CONFIGS: Tuple[PropertyConfig, ...] = (
    HTML_PROPERTY_CONFIG,
    SVG_PROPERTY_CONFIG,
)

# Attributes the platform tables miss or map differently from JSX.
ATTRIBUTE_OVERRIDES: Dict[str, str] = {
    "for": "htmlFor",
    "class": "className",
    "autofocus": "autoFocus",
    "enterkeyhint": "enterKeyHint",
    "fetchpriority": "fetchPriority",
}

ELEMENT_ATTRIBUTE_MAPPING: Dict[str, Dict[str, str]] = {
    # Uncontrolled form inputs stay editable.
    "input": {
        "checked": "defaultChecked",
        "value": "defaultValue",
    },
}

ELEMENT_TAG_NAME_MAPPING: Dict[str, str] = {
    "a": "a",
    "altglyph": "altGlyph",
    "altglyphdef": "altGlyphDef",
    "altglyphitem": "altGlyphItem",
    "animatecolor": "animateColor",
    "animatemotion": "animateMotion",
    "animatetransform": "animateTransform",
    "clippath": "clipPath",
    "feblend": "feBlend",
    "fecolormatrix": "feColorMatrix",
    "fecomponenttransfer": "feComponentTransfer",
    "fecomposite": "feComposite",
    "feconvolvematrix": "feConvolveMatrix",
    "fediffuselighting": "feDiffuseLighting",
    "fedisplacementmap": "feDisplacementMap",
    "fedistantlight": "feDistantLight",
    "fedropshadow": "feDropShadow",
    "feflood": "feFlood",
    "fefunca": "feFuncA",
    "fefuncb": "feFuncB",
    "fefuncg": "feFuncG",
    "fefuncr": "feFuncR",
    "fegaussianblur": "feGaussianBlur",
    "feimage": "feImage",
    "femerge": "feMerge",
    "femergenode": "feMergeNode",
    "femorphology": "feMorphology",
    "feoffset": "feOffset",
    "fepointlight": "fePointLight",
    "fespecularlighting": "feSpecularLighting",
    "fespotlight": "feSpotLight",
    "fetile": "feTile",
    "feturbulence": "feTurbulence",
    "foreignobject": "foreignObject",
    "glyphref": "glyphRef",
    "lineargradient": "linearGradient",
    "radialgradient": "radialGradient",
    "textpath": "textPath",
}


@dataclass(frozen=True)
class AttributeTables:
    """Read-only lookup tables shared by every conversion."""

    attributes: Mapping[str, str]
    element_attributes: Mapping[str, Mapping[str, str]]
    tag_names: Mapping[str, str]


def _merge_platform_attributes(
    overrides: Mapping[str, str], configs: Iterable[PropertyConfig]
) -> Dict[str, str]:
    merged: Dict[str, str] = dict(overrides)
    for config in configs:
        for attribute, prop in config.attribute_pairs():
            # The parser lower-cases attribute names, so keys must match.
            merged.setdefault(attribute.lower(), prop)
    return merged


def build_attribute_tables(
    overrides: Mapping[str, str] | None = None,
    configs: Iterable[PropertyConfig] | None = None,
    element_attributes: Mapping[str, Mapping[str, str]] | None = None,
    tag_names: Mapping[str, str] | None = None,
) -> AttributeTables:
    """Build the attribute tables.

    Overrides win over every platform table, and an earlier platform table
    wins over a later one: an attribute is only added when no entry exists.
    """
    attributes = _merge_platform_attributes(
        ATTRIBUTE_OVERRIDES if overrides is None else overrides,
        PLATFORM_PROPERTY_CONFIGS if configs is None else configs,
    )
    per_element = ELEMENT_ATTRIBUTE_MAPPING if element_attributes is None else element_attributes
    return AttributeTables(
        attributes=MappingProxyType(attributes),
        element_attributes=MappingProxyType(
            {tag.lower(): MappingProxyType(dict(table)) for tag, table in per_element.items()}
        ),
        tag_names=MappingProxyType(
            dict(ELEMENT_TAG_NAME_MAPPING if tag_names is None else tag_names)
        ),
    )


DEFAULT_TABLES = build_attribute_tables()


__all__ = [
    "ATTRIBUTE_OVERRIDES",
    "AttributeTables",
    "DEFAULT_TABLES",
    "ELEMENT_ATTRIBUTE_MAPPING",
    "ELEMENT_TAG_NAME_MAPPING",
    "HTML_PROPERTY_CONFIG",
    "PLATFORM_PROPERTY_CONFIGS",
    "PropertyConfig",
    "SVG_PROPERTY_CONFIG",
    "build_attribute_tables",
]
