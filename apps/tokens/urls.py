from django.urls import path
from . import views

app_name = 'tokens'

urlpatterns = [
    # GET  /api/tokens/           - Current balance
    # GET  /api/tokens/packages/  - Fixed price list
    # POST /api/tokens/purchase/  - Buy a package
    # GET  /api/tokens/history/   - Purchase history
    path('', views.balance, name='balance'),
    path('packages/', views.packages, name='packages'),
    path('purchase/', views.purchase, name='purchase'),
    path('history/', views.history, name='history'),
]
