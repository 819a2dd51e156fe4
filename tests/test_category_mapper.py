import pytest

from extsort.category_mapper import (
    CATCH_ALL_CATEGORY,
    DEFAULT_CATEGORIES,
    CategoryMapper,
    DuplicateExtensionError,
    file_extension,
    normalize_extension,
)


@pytest.fixture
def mapper():
    return CategoryMapper()


def test_every_declared_extension_maps_to_its_category(mapper):
    for category, extensions in DEFAULT_CATEGORIES.items():
        for ext in extensions:
            assert mapper.get_category_for_extension(ext) == category
            assert mapper.get_category_for_extension(ext.upper()) == category
            assert mapper.get_category_for_extension(ext.title()) == category


@pytest.mark.parametrize("ext", [".xyz", ".PDFX", ".", "", None, ".docx2"])
def test_unknown_extensions_fall_back_to_catch_all(mapper, ext):
    assert mapper.get_category_for_extension(ext) == CATCH_ALL_CATEGORY


def test_extension_without_dot_is_normalized(mapper):
    assert mapper.get_category_for_extension("mp3") == "Music"
    assert normalize_extension("PNG") == ".png"


@pytest.mark.parametrize("name, category", [
    ("report.PDF", "Documents"),
    ("song.mp3", "Music"),
    ("tool.exe", "Programs"),
    ("backup.tar.gz", "Compressed"),
    ("photo.final.JPG", "Images"),
    ("clip.m2ts", "Video"),
    ("data.unknown", CATCH_ALL_CATEGORY),
    ("notes", CATCH_ALL_CATEGORY),
    ("archive.", CATCH_ALL_CATEGORY),
])
def test_file_category(mapper, name, category):
    assert mapper.get_file_category(name) == category


def test_category_names_keep_table_order(mapper):
    assert mapper.get_category_names() == [
        "Programs", "Documents", "Compressed", "Music", "Video", "Images", "Others"
    ]


def test_catch_all_category_has_no_extensions(mapper):
    assert mapper.get_all_categories()[CATCH_ALL_CATEGORY] == []
    assert CATCH_ALL_CATEGORY not in mapper.extension_map.values()


def test_get_all_categories_returns_a_copy(mapper):
    categories = mapper.get_all_categories()
    categories["Music"].append(".zzz")
    categories["Extra"] = [".abc"]

    assert ".zzz" not in mapper.get_all_categories()["Music"]
    assert "Extra" not in mapper.get_category_names()
    assert mapper.get_category_for_extension(".zzz") == CATCH_ALL_CATEGORY


def test_duplicate_extension_across_categories_is_rejected():
    with pytest.raises(DuplicateExtensionError) as excinfo:
        CategoryMapper({"Audio": [".ogg"], "Video": [".OGG"]})

    assert excinfo.value.extension == ".ogg"
    assert excinfo.value.categories == ("Audio", "Video")


def test_custom_table_gets_catch_all_category():
    mapper = CategoryMapper({"Books": ["epub", ".MOBI"]})

    assert mapper.get_category_names() == ["Books", CATCH_ALL_CATEGORY]
    assert mapper.get_category_for_extension(".mobi") == "Books"
    assert mapper.get_file_category("novel.EPUB") == "Books"
    assert mapper.get_file_category("song.mp3") == CATCH_ALL_CATEGORY


def test_supported_extensions(mapper):
    extensions = mapper.get_supported_extensions()
    assert {".pdf", ".mp3", ".tar.gz", ".exe"} <= extensions
    assert len(extensions) == sum(len(exts) for exts in DEFAULT_CATEGORIES.values())


@pytest.mark.parametrize("name, extension", [
    ("report.PDF", ".PDF"),
    ("backup.tar.gz", ".gz"),
    ("archive.", "."),
    ("notes", ""),
    (".bashrc", ""),
    (".", ""),
    ("..", ""),
])
def test_file_extension(name, extension):
    assert file_extension(name) == extension
