"""Style generators. Each is a pure function (dims, rng, palette, params) -> primitives."""
