from django.views.decorators.http import require_safe

from apps.utils.api_response import text_response


@require_safe
def root(request):
    return text_response("This is root")
