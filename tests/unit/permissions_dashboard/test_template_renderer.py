"""Unit tests for the dashboard template."""

from unittest.mock import patch

import pytest
from jinja2 import TemplateNotFound
from starlette.requests import Request

from permissions_dashboard.exceptions import TemplateRenderException
from permissions_dashboard.models import DashboardArgs, ViewModel
from permissions_dashboard.views import template_renderer
from permissions_dashboard.views.template_renderer import TemplateRenderer


@pytest.fixture
def request_stub():
    return Request({"type": "http", "method": "GET", "path": "/", "headers": [], "query_string": b""})


@pytest.fixture
def args():
    return DashboardArgs(grpc_addr="grpc.example.com:50051", grpc_no_tls=False, datastore_engine="postgres")


def render(request, view, args, analytics_tag=None):
    response = TemplateRenderer.render_dashboard(request, view, args, analytics_tag)
    assert response.status_code == 200
    return response.body.decode()


def test_not_ready_shows_migration_guidance(request_stub, args):
    html = render(request_stub, ViewModel(is_ready=False), args)

    assert "Getting Started with SpiceDB" in html
    assert "spicedb migrate head --datastore-engine=postgres" in html
    assert "Current Schema" not in html
    assert "Defining the permissions schema" not in html


def test_empty_store_shows_sample_schema_instructions(request_stub, args):
    html = render(request_stub, ViewModel(is_ready=True, is_empty=True), args)

    assert "Defining the permissions schema" in html
    assert "zed context set first-dev-context grpc.example.com:50051" in html
    assert "definition resource {" in html
    assert "--insecure" not in html
    assert "Getting Started with SpiceDB" not in html


def test_insecure_flag_added_without_tls(request_stub):
    args = DashboardArgs(grpc_addr="localhost:50051", grpc_no_tls=True, datastore_engine="memory")

    html = render(request_stub, ViewModel(is_ready=True, is_empty=True), args)

    assert "zed schema write sample.zed --insecure" in html


def test_schema_is_shown_and_escaped(request_stub, args):
    view = ViewModel(is_ready=True, schema_text="definition <script> {}")

    html = render(request_stub, view, args)

    assert "Current Schema" in html
    assert "definition &lt;script&gt; {}" in html
    assert "Sample Calls" not in html


def test_sample_calls_shown_for_sample_schema(request_stub, args):
    view = ViewModel(is_ready=True, schema_text="definition user {}", has_sample_schema=True)

    html = render(request_stub, view, args)

    assert "Sample Calls" in html
    assert "zed relationship create user:sampleuser reader resource:sampleresource" in html
    assert "zed permission check user:sampleuser view resource:sampleresource" in html


def test_analytics_snippet_only_when_configured(request_stub, args):
    view = ViewModel(is_ready=False)

    assert "googletagmanager" not in render(request_stub, view, args)
    assert "gtag('config', 'G-TEST123')" in render(request_stub, view, args, analytics_tag="G-TEST123")


def test_template_error_raises_render_exception(request_stub, args):
    with patch.object(template_renderer.templates, "TemplateResponse", side_effect=TemplateNotFound("index.html")):
        with pytest.raises(TemplateRenderException) as exc_info:
            TemplateRenderer.render_dashboard(request_stub, ViewModel(), args)

    assert exc_info.value.details["template"] == "index.html"
