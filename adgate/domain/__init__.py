"""Domain layer: directory ports, results and errors. No framework imports."""
