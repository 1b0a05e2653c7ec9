from django.urls import path
from . import views

app_name = 'groceries'

urlpatterns = [
    # GET /api/groceries/                     - Items still to buy
    # POST /api/groceries/add/                - Add item
    # PUT /api/groceries/{item_id}/purchase/  - Buy item, records an expense
    path('', views.grocery_list, name='list'),
    path('add/', views.add, name='add'),
    path('<uuid:item_id>/purchase/', views.purchase, name='purchase'),
]
