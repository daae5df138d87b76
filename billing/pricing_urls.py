from django.urls import path
from . import views

urlpatterns = [
    path("general-fees/", views.general_fees, name="pricing-general-fees"),
    path("<slug:category>/", views.price_list, name="pricing-list"),
    path("<slug:category>/items/", views.price_item_create, name="pricing-item-create"),
    path("<slug:category>/items/<int:pk>/", views.price_item_detail, name="pricing-item-detail"),
]
