# =============================================================================
# tests/ - Test Suite
# =============================================================================
# One module per library area:
# - test_predicates.py: kind tags, empty constants, nil defaulting
# - test_accessors.py: selectors, deep lookup, deep picking
# - test_lists.py: by-prop operators and their memoized specializations
# - test_objects_strings.py: key renaming, number formatting
# - test_combinators.py: curry, memoize, to_string, pipe/compose
# - test_debug.py / test_config.py / test_registry.py: ambient stack
#
# Run tests with: pytest
# =============================================================================
