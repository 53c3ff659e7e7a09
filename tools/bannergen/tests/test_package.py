"""
Package export tests.
"""
import bannergen


def test_exports():
    for name in bannergen.__all__:
        assert hasattr(bannergen, name), name


def test_render_through_package():
    catalog = bannergen.build_catalog('list')
    assert bannergen.BannerRenderer(catalog).render("OOPS") == bannergen.render("OOPS", catalog)
