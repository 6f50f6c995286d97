from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'debts'

router = SimpleRouter(trailing_slash=False)
router.register(r'debts', views.DebtViewSet, basename='debt')
router.register(r'debt-payments', views.DebtPaymentViewSet, basename='debtpayment')

urlpatterns = [
    # GET    /api/debts                  - List debts
    # POST   /api/debts                  - Create debt
    # GET    /api/debts/{id}             - Debt detail
    # PATCH  /api/debts/{id}             - Rename / change total
    # GET    /api/debts/stats            - Dashboard totals
    # GET    /api/debt-payments          - List payments (debtId)
    # POST   /api/debt-payments          - Record payment
    path('', include(router.urls)),
]
