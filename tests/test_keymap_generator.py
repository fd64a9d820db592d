"""
Tests for the keymap generator — vim.keymap.set calls and *map commands.
"""

from vimforge.core.models import KeymapFields
from vimforge.core.services.generators.keymap import keymap_lua, keymap_vimscript


def _fields(**overrides) -> KeymapFields:
    data = {"mode": "n", "lhs": "<leader>ff", "rhs": ":Telescope find_files<CR>"}
    data.update(overrides)
    return KeymapFields(**data)


# ═══════════════════════════════════════════════════════════════════
#  Lua
# ═══════════════════════════════════════════════════════════════════


class TestKeymapLua:
    def test_plain_mapping(self):
        assert keymap_lua(_fields()) == (
            "vim.keymap.set('n', '<leader>ff', ':Telescope find_files<CR>', {})"
        )

    def test_description_adds_comment_and_desc(self):
        out = keymap_lua(_fields(description="Find files", silent=True))
        assert out == (
            "-- Find files\n"
            "vim.keymap.set('n', '<leader>ff', ':Telescope find_files<CR>', "
            "{ desc = 'Find files', silent = true })"
        )

    def test_option_order(self):
        out = keymap_lua(_fields(noremap=False, buffer=True, silent=True, expr=True, description="d"))
        assert out.endswith("{ desc = 'd', remap = true, buffer = true, silent = true, expr = true })")

    def test_non_recursive_is_not_spelled_out(self):
        assert "remap" not in keymap_lua(_fields(noremap=True))

    def test_blank_noremap_stays_non_recursive(self):
        for blank in (None, ""):
            assert keymap_lua(_fields(noremap=blank)).endswith(", {})")

    def test_all_modes(self):
        assert keymap_lua(_fields(mode="")).startswith("vim.keymap.set('', ")

    def test_quotes_escaped(self):
        out = keymap_lua(_fields(rhs=":echo 'hi'<CR>", description="it's"))
        assert "':echo \\'hi\\'<CR>'" in out
        assert "desc = 'it\\'s'" in out


# ═══════════════════════════════════════════════════════════════════
#  Vimscript
# ═══════════════════════════════════════════════════════════════════


class TestKeymapVimscript:
    def test_plain_mapping(self):
        assert keymap_vimscript(_fields()) == "nnoremap <leader>ff :Telescope find_files<CR>"

    def test_recursive(self):
        assert keymap_vimscript(_fields(noremap=False)) == "nmap <leader>ff :Telescope find_files<CR>"

    def test_blank_noremap_stays_non_recursive(self):
        for blank in (None, ""):
            out = keymap_vimscript(_fields(lhs="jk", rhs="<Esc>", noremap=blank))
            assert out == "nnoremap jk <Esc>"

    def test_modifier_order(self):
        out = keymap_vimscript(_fields(mode="i", lhs="jk", rhs="<Esc>", expr=True, buffer=True, silent=True))
        assert out == "inoremap <silent> <buffer> <expr> jk <Esc>"

    def test_all_modes(self):
        assert keymap_vimscript(_fields(mode="", noremap=False)) == (
            "map <leader>ff :Telescope find_files<CR>"
        )

    def test_description_comment(self):
        out = keymap_vimscript(_fields(description="Find files"))
        assert out.splitlines() == [
            '" Find files',
            "nnoremap <leader>ff :Telescope find_files<CR>",
        ]

    def test_values_verbatim(self):
        out = keymap_vimscript(_fields(rhs=":echo \"it's\"<CR>"))
        assert out.endswith(":echo \"it's\"<CR>")
