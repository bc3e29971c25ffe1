"""
Basic usage example for QueryMapper.
"""

from querymapper import FilterParser, ParameterNotFoundError


def main():
    print("=" * 60)
    print("QueryMapper Basic Usage Example")
    print("=" * 60)

    # 1. Parse a query string (already percent-decoded by the web framework)
    print("\n1. Parsing query string...")
    query = "age-min=18&name-lk=John&status-not=null&tag-in=a,b&sort=name&page=2"
    parser = FilterParser("/users", query)
    print(f"   {parser}")

    # 2. WHERE conditions
    print("\n2. WHERE conditions:")
    for condition in parser.where_parameters():
        print(f"   {condition.key:<8} {condition.operator:<10} {condition.value!r}")

    # 3. Predefined parameters
    print("\n3. Predefined parameters:")
    for key in parser.predefined_parameters():
        condition = parser.find_parameter(key)
        if condition is not None:
            print(f"   {key} = {condition.value}")

    # 4. Lookups
    print("\n4. Lookups...")
    try:
        parser.query_parameter("limit")
    except ParameterNotFoundError as e:
        print(f"   {e}")

    # 5. Malformed segments are skipped
    print("\n5. Malformed input...")
    parser = FilterParser("/users", "a=1&oops&b=x=y")
    print(f"   Parsed: {[c.to_dict() for c in parser]}")
    print(f"   Skipped: {list(parser.malformed_segments)}")

    print("\n" + "=" * 60)
    print("Example completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
