"""Tests for the declaration scanner."""

from ipcspec_mcp.parser import scan_declarations, get_declaration_regex


SOURCE = '''import { ipcMain } from "electron";
import type { Config } from './config';
const fs = require('node:fs');

export interface Options {
    verbose: boolean;
}

interface Internal {
    id: number;
}

export type Mode = "fast" | "slow";
type Hidden = string;

export function doThing(opts: Options): Mode {
    return "fast";
}

function notExported(a: number) {
}
'''


def test_scan_kinds_in_order():
    """Test that declarations are found in encounter order."""
    kinds = [d.kind for d in scan_declarations(SOURCE)]
    assert kinds == [
        "import", "import", "require",
        "interface", "interface",
        "type", "type",
        "function",
    ]


def test_scan_captures_paths():
    """Test module path capture for imports and requires."""
    paths = [d.from_path for d in scan_declarations(SOURCE) if d.kind in ("import", "require")]
    assert paths == ["electron", "./config", "node:fs"]


def test_scan_type_names_and_export():
    """Test type/interface names and export flags."""
    types = [(d.kind, d.name, d.is_exported) for d in scan_declarations(SOURCE)
             if d.kind in ("type", "interface")]
    assert types == [
        ("interface", "Options", True),
        ("interface", "Internal", False),
        ("type", "Mode", True),
        ("type", "Hidden", False),
    ]


def test_scan_function_header_only():
    """Test that function matches stop at the opening brace."""
    funcs = [d for d in scan_declarations(SOURCE) if d.kind == "function"]
    assert len(funcs) == 1
    assert funcs[0].text == "export function doThing(opts: Options): Mode {\n"


def test_scan_texts_are_substrings():
    """Test that every fragment is a newline-terminated slice of the input."""
    for declaration in scan_declarations(SOURCE):
        assert declaration.text in SOURCE
        assert declaration.text.endswith("\n")


def test_interface_definition_includes_body():
    """Test that interface fragments run through the closing brace."""
    options = next(d for d in scan_declarations(SOURCE) if d.name == "Options")
    assert options.text == "export interface Options {\n    verbose: boolean;\n}\n"


def test_indented_declarations_are_skipped():
    """Test that alternatives only match at line start."""
    source = "  export type A = string;\n    import x from 'y';\n"
    assert list(scan_declarations(source)) == []


def test_unrecognized_forms_are_skipped():
    """Test that unsupported declaration styles produce nothing."""
    source = (
        "export const handler = () => {};\n"
        "export class Service {\n}\n"
        "export function generic<T>(a: T): Promise<T> {\n}\n"
    )
    assert list(scan_declarations(source)) == []


def test_regex_is_multiline():
    """Test the combined regex anchors at every line."""
    regex = get_declaration_regex()
    assert regex.search("\nexport type A = B;\n") is not None
