from django.http import Http404
from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from accounts.permissions import IsAdminOrReadOnly
from audit.services import log_activity
from .containers import InvoiceContainer
from .enums import InvoiceStatus, PriceCategory
from .models import Invoice
from .serializers import (
    InvoiceSerializer,
    GeneralFeesSerializer,
    PriceItemSerializer,
    NewPriceItemSerializer,
    WardTariffSerializer,
    NewWardTariffSerializer,
)
from .services import pricing
from .services.invoices import list_invoices


# --- Invoices ---
class InvoiceViewSet(viewsets.GenericViewSet, mixins.ListModelMixin, mixins.RetrieveModelMixin):
    queryset = Invoice.objects.all().order_by("-date", "-id")
    serializer_class = InvoiceSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        qp = self.request.query_params
        return list_invoices(
            patient_id=qp.get("patient") or None,
            status=qp.get("status") or None,
        )

    def create(self, request, *args, **kwargs):
        s = InvoiceSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        invoice = InvoiceContainer(actor=request.user).create(s.validated_data)
        return Response(InvoiceSerializer(invoice).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        s = InvoiceSerializer(instance, data=request.data, partial=kwargs.pop("partial", False))
        s.is_valid(raise_exception=True)
        invoice = InvoiceContainer(actor=request.user).update(instance.pk, s.validated_data)
        return Response(InvoiceSerializer(invoice).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        InvoiceContainer(actor=request.user).remove(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"])
    def statuses(self, request):
        return Response([{"value": c, "label": l} for c, l in InvoiceStatus.choices])


# --- Pricing ---
PRICE_LISTS = {
    "lab-tests": (PriceCategory.LAB_TEST, PriceItemSerializer, NewPriceItemSerializer),
    "other-services": (PriceCategory.OTHER_SERVICE, PriceItemSerializer, NewPriceItemSerializer),
    "ward-tariffs": (PriceCategory.WARD_TARIFF, WardTariffSerializer, NewWardTariffSerializer),
}


def _price_list(slug):
    try:
        return PRICE_LISTS[slug]
    except KeyError:
        raise Http404("Unknown price list.")


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated, IsAdminOrReadOnly])
def general_fees(request):
    """
    GET  -> {consultation_fee, checkup_fee}
    POST -> merge the given fees into the stored document
    """
    if request.method == "GET":
        return Response(GeneralFeesSerializer(pricing.get_general_fees()).data)

    s = GeneralFeesSerializer(data=request.data, partial=True)
    s.is_valid(raise_exception=True)
    fees = pricing.update_general_fees(s.validated_data)
    log_activity(actor=request.user, action="Updated general consultation/check-up fees", target_type="Pricing", icon="DollarSign")
    return Response(GeneralFeesSerializer(fees).data)


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated, IsAdminOrReadOnly])
def price_list(request, category):
    """GET the list; POST replaces the whole list."""
    cat, serializer_class, _ = _price_list(category)
    if request.method == "GET":
        return Response(serializer_class(pricing.list_price_items(cat), many=True).data)

    s = serializer_class(data=request.data, many=True)
    s.is_valid(raise_exception=True)
    items = pricing.replace_price_items(cat, s.validated_data)
    log_activity(actor=request.user, action=f"Replaced {PriceCategory(cat).label} price list ({len(items)} items)", target_type="Pricing", icon="DollarSign")
    return Response(serializer_class(items, many=True).data)


@api_view(["POST"])
@permission_classes([IsAuthenticated, IsAdminOrReadOnly])
def price_item_create(request, category):
    cat, serializer_class, new_serializer_class = _price_list(category)
    s = new_serializer_class(data=request.data)
    s.is_valid(raise_exception=True)
    item = pricing.add_price_item(cat, s.validated_data)
    return Response(serializer_class(item).data, status=status.HTTP_201_CREATED)


@api_view(["PATCH", "DELETE"])
@permission_classes([IsAuthenticated, IsAdminOrReadOnly])
def price_item_detail(request, category, pk):
    cat, serializer_class, _ = _price_list(category)
    if request.method == "DELETE":
        pricing.delete_price_item(cat, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    s = serializer_class(data=request.data, partial=True)
    s.is_valid(raise_exception=True)
    item = pricing.update_price_item(cat, pk, s.validated_data)
    return Response(serializer_class(item).data)
