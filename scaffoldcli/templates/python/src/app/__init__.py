def greet(name: str = "world") -> str:
    return f"Hello, {name}!"
