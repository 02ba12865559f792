"""
Examples of using the PCSet toolkit.

This file demonstrates the set operations, canonical forms, subset search
and configuration, from single pitch classes up to whole workflows.
"""


def example_pitch_classes():
    """Example of single pitch-class operations."""
    from pcset import transpose_pc, invert_pc, pc_from_alpha, pc_to_alpha, pc_to_chromatic
    
    print("Example: Pitch classes")
    print("-" * 40)
    
    print(f"T2 of B (11):       {transpose_pc(11, 2)}")
    print(f"Inversion of 3:     {invert_pc(3)}")
    print(f"'A' as a number:    {pc_from_alpha('A')}")
    print(f"11 as alpha:        {pc_to_alpha(11)}")
    print(f"Name of 3:          {pc_to_chromatic(3)}")
    print()


def example_set_operations():
    """Example of transforming a set with ForteSet."""
    from pcset import ForteSet
    
    print("Example: Set operations")
    print("-" * 40)
    
    pentachord = ForteSet([0, 3, 5, 6, 9])
    print(f"Set:                {pentachord}")
    print(f"T4:                 {pentachord.transpose(4)}")
    print(f"Inversion:          {pentachord.invert()}")
    print(f"Complement:         {pentachord.complement()}")
    
    # In place: every reference to the set sees the change
    reference = pentachord
    pentachord.transpose(1, inplace=True)
    print(f"T1 in place:        {reference}")
    print()


def example_canonical_forms():
    """Example of normal, reduced and prime forms."""
    from pcset import normalize, reduce, prime, to_chromatic
    
    print("Example: Canonical forms")
    print("-" * 40)
    
    pcs = [1, 4, 6, 7, 10]
    print(f"Set:                {pcs} {to_chromatic(pcs)}")
    print(f"Normal form:        {normalize(pcs)}")
    print(f"Reduced form:       {reduce(pcs)}")
    print(f"Prime form:         {prime(pcs)}")
    print()


def example_subset_search():
    """Example of searching a sonority for subsets and pairing sets."""
    from pcset import search_for_subsets, permutate_set_pairs
    
    print("Example: Subset search")
    print("-" * 40)
    
    candidates, found = search_for_subsets([2, 3, 4, 6, 7, 9], [[3, 0, 9], [2, 3, 7], [4, 6, 9]])
    for candidate, is_subset in zip(candidates, found):
        print(f"{candidate}: {'found' if is_subset else 'not found'}")
    
    pairs = permutate_set_pairs([[0, 1, 2], [2, 1, 0], [3, 4, 5]])
    print(f"Pairs without retrogrades: {pairs}")
    print()


def example_cli_commands():
    """Example CLI commands."""
    print("Example: CLI Commands")
    print("-" * 40)
    
    print('pcset transform "0,3,5,6,9" -t 4')
    print('pcset prime "1,4,6,7,A" --alpha')
    print('pcset analyze "0,4,7"')
    print('pcset subsets "2,3,4,6,7,9" "3,0,9" "2,3,7"')
    print('pcset --config settings.json names "0,4,7"')
    print()


def example_custom_configuration():
    """Example of custom configuration."""
    from pcset.config import get_config, set_config, update_config
    
    print("Example: Custom Configuration")
    print("-" * 40)
    
    print(f"Current notation: {get_config('display', 'notation')}")
    
    set_config('alpha', 'strict_parsing', True)
    update_config({'display': {'notation': 'alpha', 'separator': ' '}})
    
    print("Configuration updated:")
    print("- Strict alpha parsing: True")
    print("- Notation: alpha")
    print()


def example_error_handling():
    """Example of proper error handling."""
    from pcset import prime, compare_compact, pc_from_alpha
    from pcset.exceptions import EmptySetError, LengthMismatchError, AlphaParseError
    
    print("Example: Error Handling")
    print("-" * 40)
    
    try:
        prime([])
    except EmptySetError as e:
        print(f"Prime form failed: {e}")
    
    try:
        compare_compact([0, 1, 2], [0, 1])
    except LengthMismatchError as e:
        print(f"Comparison failed: {e}")
    
    try:
        pc_from_alpha('x', strict=True)
    except AlphaParseError as e:
        print(f"Parsing failed: {e}")
    print()


if __name__ == "__main__":
    print("PCSet Usage Examples")
    print("=" * 50)
    print()
    
    example_pitch_classes()
    example_set_operations()
    example_canonical_forms()
    example_subset_search()
    example_cli_commands()
    example_custom_configuration()
    example_error_handling()
