from django.urls import path
from . import views

app_name = 'people'

urlpatterns = [
    # GET  /api/people/?search=      - Check-in search (staff)
    path('', views.search, name='search'),

    # Registration
    path('register/', views.register, name='register'),
    path('quick-register/', views.quick_register, name='quick-register'),
    path('consolidation/', views.consolidation, name='consolidation'),

    # Lookups
    path('lookup/', views.lookup, name='lookup'),
    path('by-email/', views.by_email, name='by-email'),
    path('incomplete/', views.incomplete, name='incomplete'),
    path('churches/', views.churches, name='churches'),

    # Reports
    path('export/', views.export_csv, name='export'),

    # Single person
    path('<uuid:person_id>/', views.update_person, name='update'),
    path('<uuid:person_id>/orders/', views.person_orders, name='orders'),
]
