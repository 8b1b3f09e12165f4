from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('login/', views.login, name='login'),

    # Staff management
    path('promote/', views.promote, name='promote'),
]
