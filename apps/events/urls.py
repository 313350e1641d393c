from django.urls import path
from . import views

app_name = 'events'

urlpatterns = [
    path('check-in/', views.check_in, name='check-in'),
]
