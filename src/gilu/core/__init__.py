"""Transport-agnostic core: classifier, engine, errors and ports."""
