import os
import sys
import unittest


def discover_iges_tests():
    """
    Collects every test in this directory with a module name of the form ``test*.py``.

    Returns
    =======
    unittest.TestSuite
        The suite of tests discovered in ``igessurf.tests``
    """
    tests_dir = os.path.dirname(os.path.abspath(__file__))
    top_level_dir = os.path.dirname(os.path.dirname(tests_dir))
    return unittest.TestLoader().discover(tests_dir, top_level_dir=top_level_dir)


def main():
    result = unittest.TextTestRunner(verbosity=2).run(discover_iges_tests())
    sys.exit(0 if result.wasSuccessful() else 1)


if __name__ == "__main__":
    main()
