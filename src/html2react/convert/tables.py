"""Static name tables for HTML and SVG to JSX conversion.

The HTML parser lower-cases tag and attribute names, so every entry here is
keyed by the lower-case form and maps to the name React expects.
"""

from __future__ import annotations

from types import MappingProxyType

HTML_ATTRIBUTE_RENAMES = MappingProxyType(
    {
        "class": "className",
        "for": "htmlFor",
        "readonly": "readOnly",
        "maxlength": "maxLength",
        "minlength": "minLength",
        "tabindex": "tabIndex",
        "colspan": "colSpan",
        "rowspan": "rowSpan",
        "contenteditable": "contentEditable",
        "autocomplete": "autoComplete",
        "autofocus": "autoFocus",
        "autoplay": "autoPlay",
        "srcset": "srcSet",
        "crossorigin": "crossOrigin",
        "enctype": "encType",
        "novalidate": "noValidate",
        "formnovalidate": "formNoValidate",
        "usemap": "useMap",
        "ismap": "isMap",
        "spellcheck": "spellCheck",
        "datetime": "dateTime",
        "acceptcharset": "acceptCharset",
        "accept-charset": "acceptCharset",
        "allowfullscreen": "allowFullScreen",
        "inputmode": "inputMode",
        "hreflang": "hrefLang",
        "referrerpolicy": "referrerPolicy",
        "accesskey": "accessKey",
        "cellpadding": "cellPadding",
        "cellspacing": "cellSpacing",
        "charset": "charSet",
        "enterkeyhint": "enterKeyHint",
        "fetchpriority": "fetchPriority",
        "formaction": "formAction",
        "formenctype": "formEncType",
        "formmethod": "formMethod",
        "formtarget": "formTarget",
        "frameborder": "frameBorder",
        "http-equiv": "httpEquiv",
        "itemprop": "itemProp",
        "itemscope": "itemScope",
        "itemtype": "itemType",
        "marginheight": "marginHeight",
        "marginwidth": "marginWidth",
        "nomodule": "noModule",
        "playsinline": "playsInline",
        "srcdoc": "srcDoc",
        "srclang": "srcLang",
    }
)

# Hyphenated and namespaced SVG presentation attributes
SVG_ATTRIBUTE_RENAMES = MappingProxyType(
    {
        "accent-height": "accentHeight",
        "alignment-baseline": "alignmentBaseline",
        "arabic-form": "arabicForm",
        "baseline-shift": "baselineShift",
        "cap-height": "capHeight",
        "clip-path": "clipPath",
        "clip-rule": "clipRule",
        "color-interpolation": "colorInterpolation",
        "color-interpolation-filters": "colorInterpolationFilters",
        "color-profile": "colorProfile",
        "color-rendering": "colorRendering",
        "dominant-baseline": "dominantBaseline",
        "enable-background": "enableBackground",
        "fill-opacity": "fillOpacity",
        "fill-rule": "fillRule",
        "flood-color": "floodColor",
        "flood-opacity": "floodOpacity",
        "font-family": "fontFamily",
        "font-size": "fontSize",
        "font-size-adjust": "fontSizeAdjust",
        "font-stretch": "fontStretch",
        "font-style": "fontStyle",
        "font-variant": "fontVariant",
        "font-weight": "fontWeight",
        "glyph-name": "glyphName",
        "glyph-orientation-horizontal": "glyphOrientationHorizontal",
        "glyph-orientation-vertical": "glyphOrientationVertical",
        "horiz-adv-x": "horizAdvX",
        "horiz-origin-x": "horizOriginX",
        "image-rendering": "imageRendering",
        "letter-spacing": "letterSpacing",
        "lighting-color": "lightingColor",
        "marker-end": "markerEnd",
        "marker-mid": "markerMid",
        "marker-start": "markerStart",
        "overline-position": "overlinePosition",
        "overline-thickness": "overlineThickness",
        "paint-order": "paintOrder",
        "panose-1": "panose1",
        "pointer-events": "pointerEvents",
        "rendering-intent": "renderingIntent",
        "shape-rendering": "shapeRendering",
        "stop-color": "stopColor",
        "stop-opacity": "stopOpacity",
        "strikethrough-position": "strikethroughPosition",
        "strikethrough-thickness": "strikethroughThickness",
        "stroke-dasharray": "strokeDasharray",
        "stroke-dashoffset": "strokeDashoffset",
        "stroke-linecap": "strokeLinecap",
        "stroke-linejoin": "strokeLinejoin",
        "stroke-miterlimit": "strokeMiterlimit",
        "stroke-opacity": "strokeOpacity",
        "stroke-width": "strokeWidth",
        "text-anchor": "textAnchor",
        "text-decoration": "textDecoration",
        "text-rendering": "textRendering",
        "underline-position": "underlinePosition",
        "underline-thickness": "underlineThickness",
        "unicode-bidi": "unicodeBidi",
        "unicode-range": "unicodeRange",
        "units-per-em": "unitsPerEm",
        "v-alphabetic": "vAlphabetic",
        "v-hanging": "vHanging",
        "v-ideographic": "vIdeographic",
        "v-mathematical": "vMathematical",
        "vector-effect": "vectorEffect",
        "vert-adv-y": "vertAdvY",
        "vert-origin-x": "vertOriginX",
        "vert-origin-y": "vertOriginY",
        "word-spacing": "wordSpacing",
        "writing-mode": "writingMode",
        "x-height": "xHeight",
        "xlink:actuate": "xlinkActuate",
        "xlink:arcrole": "xlinkArcrole",
        "xlink:href": "xlinkHref",
        "xlink:role": "xlinkRole",
        "xlink:show": "xlinkShow",
        "xlink:title": "xlinkTitle",
        "xlink:type": "xlinkType",
        "xml:base": "xmlBase",
        "xml:lang": "xmlLang",
        "xml:space": "xmlSpace",
    }
)

# camelCase SVG attributes that lose their case in the parser
SVG_CASE_SENSITIVE_ATTRIBUTES = MappingProxyType(
    {
        "attributename": "attributeName",
        "attributetype": "attributeType",
        "basefrequency": "baseFrequency",
        "baseprofile": "baseProfile",
        "calcmode": "calcMode",
        "clippathunits": "clipPathUnits",
        "diffuseconstant": "diffuseConstant",
        "edgemode": "edgeMode",
        "filterunits": "filterUnits",
        "glyphref": "glyphRef",
        "gradienttransform": "gradientTransform",
        "gradientunits": "gradientUnits",
        "kernelmatrix": "kernelMatrix",
        "kernelunitlength": "kernelUnitLength",
        "keypoints": "keyPoints",
        "keysplines": "keySplines",
        "keytimes": "keyTimes",
        "lengthadjust": "lengthAdjust",
        "limitingconeangle": "limitingConeAngle",
        "markerheight": "markerHeight",
        "markerunits": "markerUnits",
        "markerwidth": "markerWidth",
        "maskcontentunits": "maskContentUnits",
        "maskunits": "maskUnits",
        "numoctaves": "numOctaves",
        "pathlength": "pathLength",
        "patterncontentunits": "patternContentUnits",
        "patterntransform": "patternTransform",
        "patternunits": "patternUnits",
        "pointsatx": "pointsAtX",
        "pointsaty": "pointsAtY",
        "pointsatz": "pointsAtZ",
        "preservealpha": "preserveAlpha",
        "preserveaspectratio": "preserveAspectRatio",
        "primitiveunits": "primitiveUnits",
        "refx": "refX",
        "refy": "refY",
        "repeatcount": "repeatCount",
        "repeatdur": "repeatDur",
        "requiredextensions": "requiredExtensions",
        "requiredfeatures": "requiredFeatures",
        "specularconstant": "specularConstant",
        "specularexponent": "specularExponent",
        "spreadmethod": "spreadMethod",
        "startoffset": "startOffset",
        "stddeviation": "stdDeviation",
        "stitchtiles": "stitchTiles",
        "surfacescale": "surfaceScale",
        "systemlanguage": "systemLanguage",
        "tablevalues": "tableValues",
        "targetx": "targetX",
        "targety": "targetY",
        "textlength": "textLength",
        "viewbox": "viewBox",
        "viewtarget": "viewTarget",
        "xchannelselector": "xChannelSelector",
        "ychannelselector": "yChannelSelector",
        "zoomandpan": "zoomAndPan",
    }
)

ATTRIBUTE_RENAMES = MappingProxyType(
    {**HTML_ATTRIBUTE_RENAMES, **SVG_ATTRIBUTE_RENAMES, **SVG_CASE_SENSITIVE_ATTRIBUTES}
)

SVG_CASE_SENSITIVE_ELEMENTS = MappingProxyType(
    {
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
)

BOOLEAN_ATTRIBUTES = frozenset(
    {
        "disabled",
        "checked",
        "readonly",
        "required",
        "autofocus",
        "selected",
        "multiple",
        "novalidate",
        "formnovalidate",
        "allowfullscreen",
        "autoplay",
        "controls",
        "loop",
        "muted",
        "playsinline",
        "default",
        "ismap",
        "reversed",
        "async",
        "defer",
        "nomodule",
        "hidden",
        "open",
        "itemscope",
        "spellcheck",
        "autocomplete",
        "translate",
        "contenteditable",
    }
)

# Elements written as <tag /> and never pushed on the tag stack
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements dropped together with everything inside them
DISCARDED_ELEMENTS = frozenset({"head", "script", "noscript", "iframe", "style"})

# Elements whose own tag is dropped while their children are still converted
TRANSPARENT_ELEMENTS = frozenset({"html"})

# Attribute values treated as absent
EMPTY_ATTRIBUTE_VALUES = frozenset({"", "{}", "[]", "null"})

IMAGE_EXTENSIONS = ("svg", "png", "jpg", "jpeg", "gif", "webp", "avif")


__all__ = [
    "ATTRIBUTE_RENAMES",
    "BOOLEAN_ATTRIBUTES",
    "DISCARDED_ELEMENTS",
    "EMPTY_ATTRIBUTE_VALUES",
    "HTML_ATTRIBUTE_RENAMES",
    "IMAGE_EXTENSIONS",
    "SVG_ATTRIBUTE_RENAMES",
    "SVG_CASE_SENSITIVE_ATTRIBUTES",
    "SVG_CASE_SENSITIVE_ELEMENTS",
    "TRANSPARENT_ELEMENTS",
    "VOID_ELEMENTS",
]
