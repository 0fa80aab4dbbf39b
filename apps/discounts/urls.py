from django.urls import path
from . import views

app_name = 'discounts'

urlpatterns = [
    path('validate/', views.validate_discount, name='validate'),
    path('apply/', views.apply_discount, name='apply'),
    path('transactions/', views.list_my_transactions, name='transactions'),

    path('budget/', views.get_current_budget, name='budget'),
    path('budget/initialize/', views.initialize_budget, name='initialize_budget'),

    path('escalations/', views.create_escalation, name='create_escalation'),
    path('escalations/pending/', views.pending_escalations, name='pending_escalations'),
    path('escalations/<int:escalation_id>/', views.escalation_detail, name='escalation_detail'),
    path('escalations/<int:escalation_id>/approve/', views.approve_escalation, name='approve_escalation'),
    path('escalations/<int:escalation_id>/deny/', views.deny_escalation, name='deny_escalation'),
    path('escalations/<int:escalation_id>/apply/', views.apply_escalation, name='apply_escalation'),

    path('tiers/', views.list_tiers, name='tiers'),
    path('tiers/<str:role>/', views.update_tier, name='update_tier'),
]
