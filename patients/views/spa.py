from django.shortcuts import render


def index(request):
    """Serve the single page staff client."""
    return render(request, 'patients/index.html', {'api_base': '/api'})
