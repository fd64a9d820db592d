"""
Form schema — what the dashboard renders for each category, and the
presence check run before a submission reaches the generator.

The dashboard builds its inputs from ``form_schema()`` so labels,
choices and required markers live in one place.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from vimforge.core.models.snippet import MANAGERS_BY_DIALECT, Category, Dialect


@dataclass(frozen=True)
class FieldSpec:
    """One form input.

    Attributes:
        name:        Key in the submitted field record.
        label:       Human label.
        kind:        ``text``, ``select``, ``checkbox`` or ``textarea``.
        required:    Must be non-blank before generation.
        choices:     (value, label) pairs for selects.
        suggestions: Free-text completions (rendered as a datalist).
        placeholder: Example value.
        default:     Initial value.
    """

    name: str
    label: str
    kind: str = "text"
    required: bool = False
    choices: tuple[tuple[str, str], ...] = ()
    suggestions: tuple[str, ...] = ()
    placeholder: str = ""
    default: Any = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["choices"] = [{"value": value, "label": label} for value, label in self.choices]
        data["suggestions"] = list(self.suggestions)
        return data


_KEYMAP_MODES = (
    ("n", "Normal (n)"),
    ("i", "Insert (i)"),
    ("v", "Visual (v)"),
    ("x", "Visual Block (x)"),
    ("t", "Terminal (t)"),
    ("c", "Command (c)"),
    ("", "All modes"),
)

_OPTION_SCOPES = (
    ("opt", "vim.opt (recommended)"),
    ("o", "vim.o (global)"),
    ("bo", "vim.bo (buffer)"),
    ("wo", "vim.wo (window)"),
    ("g", "vim.g (global variable)"),
)

_MANAGER_LABELS = {
    "lazy.nvim": "lazy.nvim",
    "packer": "Packer",
    "vim-plug": "vim-plug",
    "dein": "dein.vim",
}

FORM_FIELDS: dict[Category, tuple[FieldSpec, ...]] = {
    Category.KEYMAP: (
        FieldSpec("mode", "Mode", kind="select", choices=_KEYMAP_MODES, default="n"),
        FieldSpec(
            "lhs", "Key binding (lhs)", required=True,
            placeholder="e.g., <leader>ff, <C-n>, jk",
        ),
        FieldSpec(
            "rhs", "Action (rhs)", required=True,
            placeholder="e.g., :Telescope find_files<CR>, :w<CR>",
        ),
        FieldSpec("description", "Description", placeholder="What does this keymap do?"),
        FieldSpec("noremap", "Non-recursive (noremap)", kind="checkbox", default=True),
        FieldSpec("buffer", "Buffer-local", kind="checkbox", default=False),
        FieldSpec("silent", "Silent", kind="checkbox", default=False),
        FieldSpec("expr", "Expression", kind="checkbox", default=False),
    ),
    Category.PLUGIN: (
        FieldSpec(
            "plugin_name", "Plugin name", required=True,
            placeholder="e.g., nvim-telescope/telescope.nvim",
        ),
        FieldSpec(
            "manager", "Plugin manager", kind="select", required=True,
            choices=tuple(_MANAGER_LABELS.items()),
        ),
        FieldSpec(
            "dependencies", "Dependencies",
            placeholder="Comma-separated, e.g., nvim-lua/plenary.nvim",
        ),
        FieldSpec(
            "setup_config", "Setup configuration (Lua table)", kind="textarea",
            placeholder="e.g., { defaults = { file_ignore_patterns = {'node_modules'} } }",
        ),
        FieldSpec("add_config", "Add setup() call", kind="checkbox", default=False),
        FieldSpec("is_optional", "Lazy load", kind="checkbox", default=False),
    ),
    Category.OPTION: (
        FieldSpec(
            "option_name", "Option name", required=True,
            placeholder="e.g., tabstop, number, relativenumber",
            suggestions=(
                "number", "relativenumber", "tabstop", "shiftwidth", "expandtab",
                "smartindent", "wrap", "cursorline", "termguicolors", "signcolumn",
            ),
        ),
        FieldSpec(
            "option_value", "Value", required=True,
            placeholder="e.g., true, 4, 'yes'",
        ),
        FieldSpec("scope", "Scope", kind="select", choices=_OPTION_SCOPES, default="opt"),
    ),
    Category.AUTOCMD: (
        FieldSpec(
            "event", "Event", required=True,
            placeholder="e.g., BufWritePre, FileType",
            suggestions=(
                "BufWritePre", "BufWritePost", "BufRead", "BufNewFile", "FileType",
                "VimEnter", "InsertEnter", "InsertLeave", "TextYankPost",
            ),
        ),
        FieldSpec("pattern", "Pattern", required=True, placeholder="e.g., *.md, python, *"),
        FieldSpec(
            "command", "Command", required=True,
            placeholder="e.g., setlocal spell, lua vim.lsp.buf.format()",
        ),
        FieldSpec("group", "Group", placeholder="Optional: organize autocmds"),
    ),
}


def required_fields(category: Category) -> list[str]:
    """Names of the fields that must be filled for ``category``."""
    return [spec.name for spec in FORM_FIELDS[category] if spec.required]


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_form(category: Category | str, fields: Mapping[str, Any]) -> dict[str, str]:
    """Presence check for a form submission.

    Returns:
        Mapping of field name → message for every blank required field.
        Empty when the record can be sent to the generator.  An unknown
        category yields no field errors; the generator reports it.
    """
    parsed = Category.parse(category)
    if parsed is None:
        return {}

    errors: dict[str, str] = {}
    for spec in FORM_FIELDS[parsed]:
        value = fields.get(spec.name)
        if spec.name == "manager" and _is_blank(value):
            value = fields.get("config_type")
        if spec.required and _is_blank(value):
            errors[spec.name] = f"{spec.label} is required"
    return errors


def form_schema() -> dict:
    """JSON-ready description of every category form."""
    return {
        "categories": [c.value for c in Category],
        "dialects": [
            {"value": Dialect.LUA.value, "label": "Lua (Neovim)"},
            {"value": Dialect.VIMSCRIPT.value, "label": "Vimscript"},
        ],
        "managers": {
            dialect.value: [m.value for m in managers]
            for dialect, managers in MANAGERS_BY_DIALECT.items()
        },
        "fields": {
            category.value: [spec.to_dict() for spec in specs]
            for category, specs in FORM_FIELDS.items()
        },
    }

