from __future__ import annotations
import re

tag_pattern = re.compile(r'<[^>]*?>', flags=re.DOTALL)
comment_pattern = re.compile(r'<!--.*?-->', flags=re.DOTALL)
name_pattern = re.compile(r'\s*([\w:.-]+)')

# attribute scanner states
KEY = 0
EQUALS = 1
VALUE = 2
ESCAPE = 3

def is_self_terminating(markup: str) -> bool:
    return markup.rstrip().endswith('/>')

def is_terminator(markup: str) -> bool:
    return markup.lstrip().startswith('</')

def is_declaration(markup: str) -> bool:
    return markup.lstrip()[:2] in ('<?', '<!')

def _tag_body(markup: str) -> str:
    body = markup.strip()
    body = body[2:] if body.startswith('</') else body.lstrip('<')
    if body.endswith('>'):
        body = body[:-1]
    if body.endswith('/'):
        body = body[:-1]
    return body.rstrip()

def get_tag(markup: str) -> str:
    match = name_pattern.match(_tag_body(markup))
    return match.group(1) if match else ""

def parse_attributes(markup: str) -> dict:
    attributes = {}
    if is_terminator(markup):
        return attributes

    match = name_pattern.match(_tag_body(markup))
    if match is None:
        return attributes

    state = KEY
    key = ""
    buf = ""
    quote = ""

    for char in _tag_body(markup)[match.end():]:
        if state == KEY:
            if char == '=':
                key = buf.strip()
                buf = ""
                state = EQUALS
            elif char.isspace():
                # valueless attribute, drop it
                buf = ""
            else:
                buf += char
        elif state == EQUALS:
            if char in ('"', "'"):
                quote = char
                state = VALUE
        elif state == VALUE:
            if char == '\\':
                state = ESCAPE
            elif char == quote:
                attributes[key] = buf
                key = buf = ""
                state = KEY
            else:
                buf += char
        else:
            buf += char
            state = VALUE

    # unterminated value at the end of the tag
    if key and key not in attributes and buf:
        attributes[key] = buf

    return attributes

def tokenize_svg(data: str) -> list[str]:
    data = comment_pattern.sub('', data)
    return [markup for markup in tag_pattern.findall(data) if not is_declaration(markup)]

def build_tree(entries: list[str]) -> Node | None:
    iterator = iter(entries)
    root = None

    for svg_element in iterator:
        if is_terminator(svg_element):
            continue
        root = Node(svg_element)
        if is_self_terminating(svg_element):
            return root
        break

    if root is None:
        return None

    r = root
    for svg_element in iterator:
        if is_terminator(svg_element):
            if r.compare_tag(svg_element):
                r = r.parent
                if r is None:
                    break
            continue

        if is_self_terminating(svg_element):
            r.add_child(svg_element)
        else:
            r = r.add_child(svg_element)

    return root

def parse_svg_string(data: str) -> Node | None:
    return build_tree(tokenize_svg(data))

def parse_svg_file(path: str) -> Node | None:
    with open(path, 'r', encoding='utf-8') as file:
        data = file.read()
    return parse_svg_string(data)

class Node:
    def __init__(self, element: str = None, tag: str = None, attributes: dict = None):
        self.element = element
        if element is not None:
            self.tag = get_tag(element)
            self.attributes = parse_attributes(element)
        else:
            self.tag = tag or ""
            self.attributes = dict(attributes or {})
        self.children: list[Node] = []
        self.parent: Node | None = None

    @classmethod
    def create(cls, tag: str, attributes: dict = None, children: list[Node] = None) -> Node:
        node = cls(tag=tag, attributes=attributes)
        for child in children or []:
            node.add_node_child(child)
        return node

    @property
    def id(self) -> str | None:
        return self.attributes.get('id')

    def add_child(self, element: str) -> Node:
        return self.add_node_child(Node(element))

    def add_node_child(self, new_node: Node) -> Node:
        new_node.parent = self
        self.children.append(new_node)
        return new_node

    def compare_tag(self, element: str) -> bool:
        return self.tag == get_tag(element)

    def get_attribute(self, attr_name: str, default: str = None) -> str | None:
        return self.attributes.get(attr_name, default)

