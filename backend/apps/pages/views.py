"""
Server-rendered pages: the landing page with the Pulse form and the admin
dashboard placeholder.
"""

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from apps.pages.forms import PulseForm
from apps.posts.exceptions import PostError
from apps.posts.services import create_post

PULSE_POST_TYPE = "sell"


@require_http_methods(["GET", "POST"])
def home(request: HttpRequest) -> HttpResponse:
    """
    Landing page with the Pulse form.

    POST with action=post creates a post as the development user.
    POST with action=copy only formats the values for WhatsApp.
    """
    pillar_slug = settings.DEFAULT_PILLAR_SLUG
    whatsapp_text = None

    if request.method == "POST" and request.POST.get("action") == "copy":
        whatsapp_text = PulseForm.whatsapp_text(request.POST)
        form = PulseForm(initial=request.POST.dict())
    elif request.method == "POST":
        form = PulseForm(request.POST)
        if form.is_valid():
            try:
                post = create_post(
                    pillar_slug=pillar_slug,
                    author_id=settings.DEV_TEST_USER_ID,
                    post_type=PULSE_POST_TYPE,
                    **form.post_fields(),
                )
            except PostError as e:
                messages.error(request, f"Error: {e}")
            else:
                messages.success(request, f"Posted: {post.id}")
                return redirect("pages:home")
        else:
            messages.error(request, "Error: please fix the highlighted fields.")
    else:
        form = PulseForm()

    return render(
        request,
        "pages/home.html",
        {
            "form": form,
            "pillar_slug": pillar_slug,
            "whatsapp_text": whatsapp_text,
        },
    )


@require_GET
def admin_dashboard(request: HttpRequest) -> HttpResponse:
    """Admin dashboard placeholder. No data yet."""
    return render(request, "pages/admin_dashboard.html")
