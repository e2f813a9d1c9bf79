"""Architectural test: the conversion engine must not depend on X11 or Qt.

The engine is pure text processing; only the host modules (daemon,
listener, replacer, tray, windows) may import Xlib or PyQt5.
"""
import sys
import os
import ast

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

PACKAGE_DIR = os.path.join(os.path.dirname(__file__), '..', 'unimath')
CORE_MODULES = ['symbols.py', 'locator.py', 'expander.py', 'completer.py', 'engine.py']
FORBIDDEN = ('Xlib', 'PyQt5')


def _imported_modules(path):
    with open(path, 'r', encoding='utf-8') as f:
        tree = ast.parse(f.read())
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module:
            yield node.module
        elif isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name


def test_core_has_no_host_imports():
    for name in CORE_MODULES:
        imports = list(_imported_modules(os.path.join(PACKAGE_DIR, name)))
        bad = [m for m in imports if m.split('.')[0] in FORBIDDEN]
        assert bad == [], f"{name} imports {bad}"


def test_core_imports_without_display():
    from unimath import UnicodeMath, expand, suggest, locate
    assert expand('\\alpha') == 'α'
    assert locate('\\alpha', 6).token == '\\alpha'
    assert ('\\alpha', 'α') in suggest('\\al')
    assert UnicodeMath().evaluate('\\pi', 3).text == 'π'


if __name__ == '__main__':
    test_core_has_no_host_imports()
    test_core_imports_without_display()
    print("All architecture tests passed.")
