from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from api.permissions import IsAdminOrManager
from api.serializers import (
    ProductModelSerializer,
    RegisterProductSerializer,
    ChangeQuantitySerializer,
    SellProductSerializer,
    ProductFilterSerializer,
)
from api.services import ProductService

class ProductViewSet(viewsets.ViewSet):
    """
    A ViewSet for the ProductModel, enabling CRUD operations and stock
    changes to be used on product data.
    """
    product_service = ProductService()

    def get_permissions(self):
        if self.action == "available":
            return [IsAuthenticated()]

        return [IsAdminOrManager()]

    def _filters(self, request):
        """
        Validates the grouping/category/model query params, ignoring empty ones.
        Returns (filters, None) or (None, error response).
        """
        params = {key: value for key, value in request.query_params.items() if value}
        serializer = ProductFilterSerializer(data=params)
        if not serializer.is_valid():
            return None, Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)
        return serializer.validated_data, None

    def create(self, request):
        """
        Register a new product.
        POST /api/products
        Body:
        {
            "model": string,
            "category": "Smartphone" | "Laptop" | "Appliance",
            "quantity": integer > 0,
            "details": string (optional),
            "sellingPrice": number > 0,
            "arrivalDate": "YYYY-MM-DD" (optional, defaults to today)
        }
        """
        serializer = RegisterProductSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        self.product_service.register_products(**serializer.validated_data)
        return Response(status=status.HTTP_200_OK)

    def partial_update(self, request, model=None):
        """
        Add units to the stock of a product.
        PATCH /api/products/{model}
        Body:
        {
            "quantity": integer > 0,
            "changeDate": "YYYY-MM-DD" (optional, defaults to today)
        }
        """
        serializer = ChangeQuantitySerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        quantity = self.product_service.change_product_quantity(model, **serializer.validated_data)
        return Response({"quantity": quantity})

    def sell(self, request, model=None):
        """
        Record the sale of some units of a product.
        PATCH /api/products/{model}/sell
        Body:
        {
            "quantity": integer > 0,
            "sellingDate": "YYYY-MM-DD" (optional, defaults to today)
        }
        """
        serializer = SellProductSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        quantity = self.product_service.sell_product(model, **serializer.validated_data)
        return Response({"quantity": quantity})

    def list(self, request):
        """
        GET /api/products
        Optional query params:
        - grouping (string) "category" or "model"
        - category (string) required with ?grouping=category, e.g. ?grouping=category&category=Laptop
        - model (string) required with ?grouping=model, e.g. ?grouping=model&model=iPhone13
        """
        filters, error = self._filters(request)
        if error:
            return error

        products = self.product_service.get_products(**filters)
        return Response(ProductModelSerializer(products, many=True).data)

    def available(self, request):
        """
        GET /api/products/available
        Same query params as GET /api/products, only products with stock > 0.
        """
        filters, error = self._filters(request)
        if error:
            return error

        products = self.product_service.get_available_products(**filters)
        return Response(ProductModelSerializer(products, many=True).data)

    def destroy(self, request, model=None):
        """
        DELETE /api/products/{model}
        """
        self.product_service.delete_product(model)
        return Response(status=status.HTTP_200_OK)

    def destroy_all(self, request):
        """
        DELETE /api/products
        """
        self.product_service.delete_all_products()
        return Response(status=status.HTTP_200_OK)
