#!/usr/bin/env python3
"""
Main test runner for the Tiny lexer tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run all Tiny lexer tests."""

    print("Tiny Lexer Test Suite")
    print("=" * 60)

    try:
        from tinyc.lexer import Lexer, LexerError
        print("Lexer modules imported successfully")
        print()
    except ImportError as e:
        print(f"Failed to import lexer modules: {e}")
        return False

    print("Testing a simple program...")
    code = """
    /* greet */
    i = 0;
    while (i < 3) {
        print("hello ", i, "\\n");
        i = i + 1;
    }
    putc('\\n');
    """
    try:
        tokens = Lexer(code).tokenize()
        print(f"  Generated {len(tokens)} tokens")
    except LexerError as e:
        print(f"  Lexing failed:\n{e}")
        return False
    print()

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"), top_level_dir=project_root)
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("=" * 60)
    print(f"Ran {result.testsRun} tests: "
          f"{len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
