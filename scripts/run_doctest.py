"""Run the docstring examples of every py_dimensional module.

The catalog, signature, quantity and expression modules document their behaviour with
`>>>` examples (unit lookups, conversions, deferred sums). This script imports each
module of the package and runs them with `doctest.ELLIPSIS`, so float reprs can be
shortened with `...`.

Run from the repository root:

    python scripts/run_doctest.py
    python scripts/run_doctest.py quantity expression   # only these modules

Prints one `FAIL` line per failing module and a closing `TOTAL <failed> <attempted>`
line. Exits with 1 when any example fails or a module can't be imported.
"""

import doctest
import importlib
import pathlib
import pkgutil
import sys

PACKAGE = 'py_dimensional'


def modules(selected=()):
    root = pathlib.Path(__file__).resolve().parents[1] / PACKAGE
    names = sorted(info.name for info in pkgutil.iter_modules([str(root)], prefix=f'{PACKAGE}.')
                   if not info.ispkg)
    if selected:
        names = [name for name in names if name.rsplit('.', 1)[-1] in selected]
    return names


def main(argv=None) -> int:
    selected = tuple(sys.argv[1:] if argv is None else argv)
    failed = attempted = broken = 0
    for name in modules(selected):
        try:
            module = importlib.import_module(name)
        except Exception as exc:
            print('IMPORT-ERROR', name, exc)
            broken += 1
            continue
        result = doctest.testmod(module, optionflags=doctest.ELLIPSIS)
        attempted += result.attempted
        failed += result.failed
        if result.failed:
            print(f'FAIL {name}: {result.failed}/{result.attempted}')
    print('TOTAL', failed, attempted)
    return int(failed > 0 or broken > 0)


if __name__ == '__main__':
    raise SystemExit(main())
