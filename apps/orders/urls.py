from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'orders'

router = SimpleRouter()
router.register(r'', views.OrderViewSet, basename='order')

urlpatterns = [
    # GET    /api/orders/                  - List orders
    # POST   /api/orders/                  - Place an order
    # GET    /api/orders/{id}/             - Get order details
    # POST   /api/orders/{id}/status/      - Change status
    # POST   /api/orders/verify-pickup/    - Verify pickup code
    path('', include(router.urls)),
]
