import importlib


def test_src_tree_uses_namespace_packages():
    # namespace packages have no __init__.py, so no __file__
    for name in ("src", "src.level", "src.systems", "src.core", "src.debug"):
        module = importlib.import_module(name)
        assert getattr(module, "__file__", None) is None, name
