"""Manifest and source templates used to generate Cargo packages."""

from __future__ import annotations

# Replaced by the input's safe name.
NAME_PLACEHOLDER: str = "%n"

# Replaced by the user-supplied source text.
SOURCE_PLACEHOLDER: str = "%%"

DEFAULT_MANIFEST: str = """
[package]
name = "%n"
version = "0.1.0"
authors = ["Anonymous"]

[[bin]]
name = "%n"
path = "%n.rs"
"""

FILE_TEMPLATE: str = "%%"

EXPR_TEMPLATE: str = """
fn main() {
    println!("{:?}", {%%});
}
"""

LOOP_TEMPLATE: str = """
use std::io::prelude::*;

fn main() {
    let mut closure = enforce_closure(
{%%}
    );
    let mut line_buffer = String::new();
    let mut stdin = std::io::stdin();
    loop {
        line_buffer.clear();
        let read_res = stdin.read_line(&mut line_buffer).unwrap_or(0);
        match read_res {
            0 => break,
            _ => closure(&line_buffer)
        };
    }
}

fn enforce_closure<F>(closure: F) -> F
where F: FnMut(&str) {
    closure
}
"""

LOOP_COUNT_TEMPLATE: str = """
use std::io::prelude::*;

fn main() {
    let mut closure = enforce_closure(
{%%}
    );
    let mut line_buffer = String::new();
    let mut stdin = std::io::stdin();
    let mut count = 0;
    loop {
        line_buffer.clear();
        let read_res = stdin.read_line(&mut line_buffer).unwrap_or(0);
        match read_res {
            0 => break,
            _ => {
                count += 1;
                closure(&line_buffer, count)
            }
        };
    }
}

fn enforce_closure<F>(closure: F) -> F
where F: FnMut(&str, usize) {
    closure
}
"""

# Source without this token is wrapped in a generated entry point.
ENTRY_POINT_TOKEN: str = "fn main"
ENTRY_POINT_STUB: str = "fn main() {}"

EXTERN_CRATE_LINE: str = "extern crate {name};\n"
WRAPPED_MAIN: str = "\nfn main() {{\n{body}\n}}"
