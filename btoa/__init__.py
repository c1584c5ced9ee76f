"""btoa — binary file to assembly source converter.

WHY: Not every assembler has a directive for including a binary file.
Every assembler can define bytes, though ("db" in Intel-style syntax,
".byte" in AT&T syntax). This package turns any file into an assembly
fragment that defines its bytes plus a symbol holding the data size.

HOW: Two stages — pick a dialect profile from the dialect table, then
stream the input through the emitter. The CLI is thin glue around them.

RULES:
- Dialect profiles are plain data; adding a dialect = one registry entry
- The emitter is dialect-agnostic and makes one linear pass over input
- Two symbols per fragment: {identifier}_file and {identifier}_file_size
"""

__version__ = "0.1.0"
