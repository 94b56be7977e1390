from glyphgrid.font_options import (
    DEFAULT_FONT_SIZE,
    FontEdging,
    FontHinting,
    FontOptions,
    parse_font_name,
    points_to_pixels,
)


def test_parse_one_font_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono")
    assert len(options.font_list) == 1


def test_parse_many_fonts_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono,Console")
    assert len(options.font_list) == 2
    assert options.font_list == ["Fira Code Mono", "Console"]


def test_parse_edging_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono:#e-subpixelantialias")
    assert options.edging is FontEdging.SUBPIXEL_ANTI_ALIAS


def test_parse_hinting_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono:#h-slight")
    assert options.hinting is FontHinting.SLIGHT


def test_parse_font_size_float_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono:h15.5")
    assert options.size == points_to_pixels(15.5)
    assert options.allow_float_size is True


def test_parse_all_params_together_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono:h15:b:i:#h-slight:#e-alias")
    assert options.size == points_to_pixels(15.0)
    assert options.bold is True
    assert options.italic is True
    assert options.edging is FontEdging.ALIAS
    assert options.hinting is FontHinting.SLIGHT
    assert options.allow_float_size is False


def test_parse_font_name_with_escapes():
    assert parse_font_name("Fira Code Mono") == "Fira Code Mono"
    assert parse_font_name("Fira_Code_Mono") == "Fira Code Mono"
    assert parse_font_name(r"Fira\_Code\_Mono") == "Fira_Code_Mono"
    assert parse_font_name(r"Fira\\_Code\\_Mono") == "Fira\\ Code\\ Mono"
    assert parse_font_name("Fira_Code_Mono\\") == "Fira Code Mono"


def test_defaults():
    options = FontOptions()
    assert options.font_list == []
    assert options.primary_font() is None
    assert options.size == points_to_pixels(DEFAULT_FONT_SIZE)
    assert options.hinting is FontHinting.FULL
    assert options.edging is FontEdging.ANTI_ALIAS


def test_empty_setting_gives_defaults():
    assert FontOptions.parse("") == FontOptions()
    assert FontOptions.parse(":::") == FontOptions()


def test_primary_font_is_first_in_list():
    options = FontOptions.parse("Fira_Code,Console")
    assert options.primary_font() == "Fira Code"


def test_unparsable_size_keeps_default_size():
    options = FontOptions.parse("Fira Code Mono:habc")
    assert options.size == points_to_pixels(DEFAULT_FONT_SIZE)


def test_unknown_hinting_and_edging_fall_back():
    assert FontHinting.parse("bogus") is FontHinting.NONE
    assert FontEdging.parse("bogus") is FontEdging.ALIAS
    assert FontHinting.parse("full") is FontHinting.FULL
    assert FontEdging.parse("antialias") is FontEdging.ANTI_ALIAS


def test_equality_ignores_allow_float_size():
    a = FontOptions.parse("Fira Code Mono:h15")
    b = FontOptions.parse("Fira Code Mono:h15.0")
    assert a.allow_float_size != b.allow_float_size
    assert a == b
    assert a != FontOptions.parse("Fira Code Mono:h16")