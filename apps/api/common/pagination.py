# PATH: apps/api/common/pagination.py
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class LimitPagePagination(PageNumberPagination):
    """
    ?page=<n>&limit=<m> (limit capped at 50)

    The client reads {total, pages, currentPage, limit} next to results.
    """
    page_size = 10
    page_query_param = "page"
    page_size_query_param = "limit"
    max_page_size = 50

    results_key = "results"

    def get_pagination_meta(self):
        paginator = self.page.paginator
        return {
            "total": paginator.count,
            "pages": paginator.num_pages if paginator.count else 0,
            "currentPage": self.page.number,
            "limit": paginator.per_page,
        }

    def get_paginated_response(self, data):
        return Response({
            **self.get_pagination_meta(),
            self.results_key: data,
        })

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                "total": {"type": "integer"},
                "pages": {"type": "integer"},
                "currentPage": {"type": "integer"},
                "limit": {"type": "integer"},
                self.results_key: schema,
            },
        }
