import pytest

from rasterposter.options import PageLayout
from rasterposter.subpagemanager import PageRegion, SubPageManager


def test_one_by_one_keeps_region_and_passes_lines():
    region = PageRegion(4, 3, 12, 24)
    manager = SubPageManager(region, PageLayout.LAYOUT_1x1)
    assert manager.region == region
    assert manager.vertical_num == 1
    line = bytes(range(12))
    manager.set_raster(line)
    assert manager.has_next_page()
    assert manager.get_raster(12) == line
    assert not manager.has_next_page()


def test_grid_region_is_divided():
    region = PageRegion(10, 5, 30, 24)
    manager = SubPageManager(region, PageLayout.LAYOUT_2x2)
    assert manager.region.width == 5
    assert manager.region.height == 3
    assert manager.region.bytes_per_line == manager.region.width * 24 // 8
    assert manager.vertical_num == 2


def test_four_by_four_has_four_subpages():
    manager = SubPageManager(PageRegion(16, 16, 16, 8), PageLayout.LAYOUT_4x4)
    assert manager.vertical_num == 4
    starts = [page.raster_start for page in manager.subpages]
    assert starts == [i * manager.region.bytes_per_line for i in range(4)]
    assert manager.subpages[0].height == 1
    assert all(page.height == manager.region.height for page in manager.subpages[1:])


def test_two_by_one_rotates_region():
    region = PageRegion(4, 6, 12, 24)
    manager = SubPageManager(region, PageLayout.LAYOUT_2x1)
    assert manager.region.height == region.width
    assert manager.region.bytes_per_line % 4 == 0
    assert manager.region.bytes_per_line >= manager.region.width * 3
    assert manager.subpages[0].height == manager.region.height


def test_input_region_is_not_changed():
    region = PageRegion(10, 5, 30, 24)
    SubPageManager(region, PageLayout.LAYOUT_3x3)
    assert region == PageRegion(10, 5, 30, 24)


def test_invalid_layout_raises():
    with pytest.raises(ValueError):
        SubPageManager(PageRegion(4, 4, 4, 8), 9)


def test_empty_manager_has_nothing():
    manager = SubPageManager(PageRegion(4, 4, 4, 8), PageLayout.LAYOUT_2x2)
    assert manager.get_raster(2) is None
    assert manager.has_next_page() is False
    assert manager.flush() is False


def test_two_by_two_line_order():
    manager = SubPageManager(PageRegion(4, 4, 4, 8), PageLayout.LAYOUT_2x2)
    manager.set_raster(b"abcd")
    assert manager.get_raster(2) == b"ab"
    manager.set_raster(b"efgh")
    fetched = []
    while manager.has_next_page():
        fetched.append(manager.get_raster(2))
    assert fetched == [b"ef", b"cd", b"gh"]
    assert manager.get_raster(2) is None


def test_flush_releases_partial_band():
    manager = SubPageManager(PageRegion(4, 6, 4, 8), PageLayout.LAYOUT_2x2)
    manager.set_raster(b"abcd")
    assert manager.get_raster(2) == b"ab"
    assert manager.flush() is True
    assert manager.has_next_page()
    assert manager.get_raster(2) == b"cd"
    assert manager.has_next_page()