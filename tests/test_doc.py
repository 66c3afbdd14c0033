import doctest
import unittest
import os

import setquery
import setquery._lib.equality
import setquery._lib.structures
import setquery._lib.operators

class TestDoctest(unittest.TestCase):
    def test_lib_doctests(self):
        for mod in (setquery, 
                    setquery._lib.equality, 
                    setquery._lib.structures, 
                    setquery._lib.operators):
            failed, _ = doctest.testmod(mod, optionflags=doctest.ELLIPSIS|doctest.IGNORE_EXCEPTION_DETAIL)
            self.assertEqual(failed, 0, mod.__name__)

    def test_readme(self):
        failed, _ = doctest.testfile(os.path.join("..", "README.md"))
        self.assertEqual(failed, 0)
