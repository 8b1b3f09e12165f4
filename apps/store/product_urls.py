from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'products'

router = DefaultRouter()
router.register(r'', views.ProductViewSet, basename='product')

urlpatterns = [
    # GET    /api/products/?category=   - List products
    # POST   /api/products/             - Create product (staff)
    # DELETE /api/products/{id}/        - Delete product (staff)
    path('', include(router.urls)),
]
