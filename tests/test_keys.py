from hrcache.cache import create_cache_key


def test_params_sorted_by_name():
    assert create_cache_key("/api/x", {"b": 2, "a": 1}) == "/api/x?a=1&b=2"
    assert create_cache_key("/api/x", {"a": 1, "b": 2}) == "/api/x?a=1&b=2"


def test_no_params_returns_endpoint():
    assert create_cache_key("/api/x", {}) == "/api/x"
    assert create_cache_key("/api/x") == "/api/x"


def test_scalar_rendering_matches_browser_client():
    key = create_cache_key(
        "/api/leaves", {"active": True, "archived": False, "dept": None, "page": 3}
    )
    assert key == "/api/leaves?active=true&archived=false&dept=null&page=3"


def test_values_are_not_url_encoded():
    # Known limitation: separators inside values are kept verbatim
    assert create_cache_key("/api/search", {"q": "a&b=c"}) == "/api/search?q=a&b=c"
    assert create_cache_key("/api/search", {"q": "a", "b": "c"}) == "/api/search?b=c&q=a"
