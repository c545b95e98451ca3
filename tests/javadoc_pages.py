"""Synthetic Javadoc pages for tests.

``render_page`` produces a class page in the JDK 17 layout (``section.detail``
anchors, ``div.member-signature`` blocks) or the JDK 8 layout (dashed
``<a name>`` anchors followed by ``<pre>`` signatures).
"""

import html
import zipfile
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

Parameter = Tuple[str, str]


def _simple(type_name: str) -> str:
    base = type_name.split('<', 1)[0]
    return base.rsplit('.', 1)[-1] + type_name[len(base):]


def _jdk17_anchor(name: str, parameters: Sequence[Parameter]) -> str:
    return f"{name}({','.join(type_name for type_name, _ in parameters)})"


def _jdk8_anchor(name: str, parameters: Sequence[Parameter]) -> str:
    types = ''.join(type_name.replace('[]', ':A') + '-' for type_name, _ in parameters)
    return f"{name}-{types}" if parameters else f"{name}--"


def _rendered_parameters(parameters: Sequence[Parameter], with_names: bool) -> str:
    rendered = []
    for type_name, name in parameters:
        text = html.escape(_simple(type_name))
        if with_names:
            text += f"&nbsp;{name}"
        rendered.append(text)
    return ',\n '.join(rendered)


def render_member(type_simple_name: str, name: Optional[str], parameters: Sequence[Parameter],
                  layout: str = 'jdk17', with_names: bool = True) -> str:
    """Render one member; ``name=None`` renders a constructor."""
    shown = name or type_simple_name
    params = _rendered_parameters(parameters, with_names)
    return_type = '' if name is None else '<span class="return-type">void</span>&nbsp;'

    if layout == 'jdk8':
        anchor = _jdk8_anchor(shown, parameters)
        modifiers = 'public&nbsp;' if name is None else 'public&nbsp;void&nbsp;'
        return (f'<a name="{html.escape(anchor)}">\n<!--   -->\n</a>\n'
                f'<ul class="blockList">\n<li class="blockList">\n<h4>{shown}</h4>\n'
                f'<pre>{modifiers}{shown}({params})</pre>\n</li>\n</ul>\n')

    anchor = _jdk17_anchor(name or '<init>', parameters)
    return (f'<li>\n<section class="detail" id="{html.escape(anchor)}">\n<h3>{shown}</h3>\n'
            f'<div class="member-signature"><span class="modifiers">public</span>&nbsp;{return_type}'
            f'<span class="element-name">{shown}</span><wbr><span class="parameters">({params})</span></div>\n'
            f'</section>\n</li>\n')


def render_page(type_name: str, members: Sequence[Tuple[Optional[str], Sequence[Parameter]]],
                layout: str = 'jdk17', with_names: bool = True) -> str:
    """Render a class page documenting the given members."""
    simple = type_name.rsplit('.', 1)[-1]
    body = ''.join(render_member(simple, name, parameters, layout, with_names)
                   for name, parameters in members)
    return (f'<!DOCTYPE HTML>\n<html lang="en">\n<head>\n<title>{simple}</title>\n</head>\n<body>\n'
            f'<h1 title="Class {simple}" class="title">Class {simple}</h1>\n'
            f'<section class="details">\n<ul class="member-list">\n{body}</ul>\n</section>\n'
            f'</body>\n</html>\n')


def write_javadoc_tree(root: Path, pages: dict, sentinel: str = 'package-list') -> Path:
    """Write ``{relative_path: text}`` pages plus a sentinel file under root."""
    root.mkdir(parents=True, exist_ok=True)
    if sentinel:
        (root / sentinel).write_text('com.example\n', encoding='utf-8')
    for relative_path, text in pages.items():
        page = root / relative_path
        page.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(text, bytes):
            page.write_bytes(text)
        else:
            page.write_text(text, encoding='utf-8')
    return root


def zip_directory(directory: Path, archive: Path, prefix: str = '') -> Path:
    """Zip a directory tree, optionally below a prefix inside the archive."""
    with zipfile.ZipFile(archive, 'w') as zf:
        for path in sorted(directory.rglob('*')):
            if path.is_file():
                zf.write(path, prefix + path.relative_to(directory).as_posix())
    return archive


def corrupt_stored_entry(archive: Path, marker: bytes, length: int = 20) -> Path:
    """Flip bytes of stored (uncompressed) entry data starting at marker."""
    data = bytearray(archive.read_bytes())
    offset = data.index(marker)
    for index in range(offset, offset + length):
        data[index] ^= 0xFF
    archive.write_bytes(bytes(data))
    return archive


FIXTURES = Path(__file__).parent / 'fixtures'
LAYOUT_FIXTURES: List[str] = ['jdk6', 'jdk8', 'jdk11', 'jdk17']
