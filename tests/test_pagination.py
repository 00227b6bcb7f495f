from app.utils.pagination import paginate, parse_positive_int


class TestParsePositiveInt:
    def test_first_valid_candidate_wins(self):
        assert parse_positive_int("3", 5, default=1) == 3
        assert parse_positive_int(None, 5, default=1) == 5

    def test_leading_digits_are_read(self):
        assert parse_positive_int("20abc", default=1) == 20

    def test_invalid_values_fall_back(self):
        assert parse_positive_int("abc", default=50) == 50
        assert parse_positive_int("0", default=50) == 50
        assert parse_positive_int("-2", default=50) == 50
        assert parse_positive_int(True, default=50) == 50


class TestPaginate:
    def test_second_page_of_120(self):
        items = list(range(1, 121))
        page_items, pagination = paginate(items, page=2, limit=50)

        assert page_items == list(range(51, 101))
        assert pagination.total == 120
        assert pagination.total_pages == 3
        assert pagination.has_next_page is True
        assert pagination.has_previous_page is True

    def test_last_page(self):
        page_items, pagination = paginate(list(range(120)), page=3, limit=50)
        assert len(page_items) == 20
        assert pagination.has_next_page is False

    def test_page_past_the_end(self):
        page_items, pagination = paginate(list(range(10)), page=5, limit=50)
        assert page_items == []
        assert pagination.total_pages == 1

    def test_camel_case_dump(self):
        _, pagination = paginate([], page=1, limit=50)
        assert pagination.model_dump(by_alias=True) == {
            "page": 1,
            "limit": 50,
            "total": 0,
            "totalPages": 0,
            "hasNextPage": False,
            "hasPreviousPage": False,
        }
