def to_camel_case(name: str) -> str:
    components = name.split("_")
    return components[0] + "".join(x[:1].upper() + x[1:] for x in components[1:])
