from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Phone/OTP authentication
    path('start/', views.start, name='start'),
    path('otp/send/', views.send_code, name='send-otp'),
    path('otp/verify/', views.verify_code, name='verify-otp'),

    # Session
    path('session/', views.session, name='session'),
    path('logout/', views.logout, name='logout'),

    # Payment
    path('payment-method/', views.payment_method, name='payment-method'),
]
