"""
relaxjson demonstration script.
"""

from dataclasses import dataclass, field

import relaxjson
from relaxjson import Json5, RelaxJSONError, make_config


@dataclass
class Server:
    host: str
    port: int
    ssl: bool = False
    features: list[str] = field(default_factory=list)


def main():
    print("relaxjson - Relaxed JSON Transpiler Demo")
    print("=" * 40)

    examples = [
        ('{ test: "this is a test"}', "Unquoted keys"),
        ("{'name': 'John', 'age': 30}", "Single quotes"),
        ('{"items": [1, 2, 3,], "active": true,}', "Trailing commas"),
        ("{ mask: 0xFF, half: .5, whole: 12., up: +1 }", "Relaxed numbers"),
        ("// leading comment\n{ a: /* inline */ 1 }", "Comments"),
        ("{ a: 'never closed }", "Unterminated string"),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:      {text.strip()}")
        print(f"Transpiled: {relaxjson.transpile(text)}")

        try:
            print(f"Decoded:    {relaxjson.loads(text)}")
        except RelaxJSONError as e:
            print(f"Error:      {e}")

    print(f"\n{len(examples) + 1}. Typed decoding with pretty output")
    config_text = """
    {
        host: 'localhost',
        port: 0x1F90,   // 8080
        features: ['auth', 'logging',],
        owner: 'ignored by default',
    }
    """
    codec = Json5(make_config(pretty_print=True, pretty_print_indent="  "))
    server = codec.decode(config_text, into=Server)
    print(f"Decoded:    {server}")
    print(f"Encoded:\n{codec.dumps(server)}")


if __name__ == "__main__":
    main()
