from django.urls import path
from . import views

app_name = 'checkpoints'

urlpatterns = [
    path('checkpoints/', views.checkpoints, name='list'),

    # Attendance
    path('count/', views.count, name='count'),
    path('track/', views.track, name='track'),

    # Counter sales
    path('sales/', views.manual_sale, name='sales'),
]
