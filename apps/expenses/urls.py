from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

router = DefaultRouter()
router.register(r'', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/expenses/             - List room expenses
    # POST   /api/expenses/             - Add expense
    # DELETE /api/expenses/{id}/        - Delete expense (owner or payer)
    # GET    /api/expenses/split/       - Total, per head, balances
    # GET    /api/expenses/chart-data/  - Contribution chart
    # POST   /api/expenses/settle/      - Settle up
    # DELETE /api/expenses/clear/       - Clear ledger (owner)
    path('', include(router.urls)),
]
