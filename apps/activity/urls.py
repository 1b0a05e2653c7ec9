from django.urls import path
from . import views

app_name = 'activity'

urlpatterns = [
    # GET    /api/activities/        - Room activity feed
    # DELETE /api/activities/clear/  - Clear feed (owner)
    path('', views.room_activities, name='list'),
    path('clear/', views.clear, name='clear'),
]
