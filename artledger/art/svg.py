from xml.sax.saxutils import escape, quoteattr

from artledger import config
from artledger.stdlib.bridge.codec import decimal_string

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'


class Element:
    """
    A node of the image document. Attributes are rendered in insertion order and children are rendered back to back,
    so the serialized bytes depend only on how the tree was assembled.
    """
    def __init__(self, tag, attrs=None, children=None, text=None):
        self.tag = tag
        self.attrs = list(attrs.items()) if isinstance(attrs, dict) else list(attrs or [])
        self.children = list(children or [])
        self.text = text

    def append(self, child):
        self.children.append(child)
        return child

    def render(self):
        attrs = ''.join(' {}={}'.format(k, quoteattr(str(v))) for k, v in self.attrs)

        if not self.children and self.text is None:
            return '<{}{}/>'.format(self.tag, attrs)

        inner = escape(self.text) if self.text is not None else ''
        inner += ''.join(child.render() for child in self.children)

        return '<{}{}>{}</{}>'.format(self.tag, attrs, inner, self.tag)

    def __str__(self):
        return self.render()


def color(hex_digits):
    return '#' + hex_digits


def header(tint):
    size = decimal_string(config.CANVAS_SIZE)

    root = Element('svg', [
        ('xmlns', SVG_NAMESPACE),
        ('width', size),
        ('height', size),
        ('viewBox', '0 0 {} {}'.format(size, size)),
    ])

    gradient = Element('radialGradient', [('id', config.GRADIENT_ID)], [
        Element('stop', [('offset', '0%'), ('stop-color', color(tint))]),
        Element('stop', [('offset', '100%'), ('stop-color', color(config.BACKGROUND_COLOR))]),
    ])

    root.append(Element('defs', children=[gradient]))
    root.append(Element('rect', [('width', size), ('height', size), ('fill', color(config.BACKGROUND_COLOR))]))

    return root


def circle_group(rotation, x, y, radius):
    transform = 'translate({},{}) rotate({})'.format(decimal_string(x), decimal_string(y), decimal_string(rotation))

    return Element('g', [('transform', transform)], [
        Element('circle', [
            ('cx', '0'),
            ('cy', '0'),
            ('r', decimal_string(radius)),
            ('fill', 'url(#{})'.format(config.GRADIENT_ID)),
        ])
    ])


def accent_group(tint, rotation):
    center = decimal_string(config.CANVAS_SIZE // 2)

    return Element('g', [('opacity', '0.6')], [
        Element('rect', [
            ('x', '100'),
            ('y', '100'),
            ('width', '300'),
            ('height', '300'),
            ('fill', 'none'),
            ('stroke', color(tint)),
            ('stroke-width', '4'),
        ]),
        Element('rect', [
            ('x', '175'),
            ('y', '175'),
            ('width', '150'),
            ('height', '150'),
            ('fill', color(tint)),
            ('fill-opacity', '0.3'),
            ('transform', 'rotate({} {} {})'.format(decimal_string(rotation), center, center)),
        ]),
    ])


def footer(label):
    return Element('text', [
        ('x', decimal_string(config.CANVAS_SIZE // 2)),
        ('y', decimal_string(config.CANVAS_SIZE - 20)),
        ('text-anchor', 'middle'),
        ('fill', color(config.TEXT_COLOR)),
        ('font-family', 'monospace'),
        ('font-size', '20'),
    ], text=label)
