from django.urls import path
from . import views

app_name = 'rooms'

urlpatterns = [
    # GET    /api/rooms/                          - Current room
    # POST   /api/rooms/create/                   - Create room
    # POST   /api/rooms/join/                     - Join with join code
    # POST   /api/rooms/leave/                    - Leave room
    # DELETE /api/rooms/delete/                   - Delete room (owner)
    # DELETE /api/rooms/remove-member/{user_id}/  - Remove member (owner)
    # PUT    /api/rooms/toggle-lock/              - Lock or unlock (owner)
    # GET    /api/rooms/public/                   - Public rooms, ?location=
    path('', views.my_room, name='my-room'),
    path('create/', views.create, name='create'),
    path('join/', views.join, name='join'),
    path('leave/', views.leave, name='leave'),
    path('delete/', views.delete, name='delete'),
    path('remove-member/<uuid:member_id>/', views.remove, name='remove-member'),
    path('toggle-lock/', views.toggle, name='toggle-lock'),
    path('public/', views.public_rooms, name='public'),
]
