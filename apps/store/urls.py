from django.urls import path
from . import views

app_name = 'orders'

urlpatterns = [
    # PIX checkout
    path('', views.create_order, name='create'),
    path('check-status/<str:payment_id>/', views.check_status, name='check-status'),
    path('webhook/abacatepay/', views.gateway_webhook, name='webhook'),

    # Pickup
    path('pending/', views.pending, name='pending'),
    path('<uuid:sale_id>/deliver/', views.deliver, name='deliver'),
    path('code/<str:code>/', views.by_code, name='by-code'),

    # Checkout with proof of payment
    path('checkout/', views.proof_checkout, name='checkout'),
    path('proofs/', views.proofs, name='proofs'),
    path('code/<str:code>/approve/', views.approve_proof, name='approve'),
    path('code/<str:code>/reject/', views.reject_proof, name='reject'),
]
