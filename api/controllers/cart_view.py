from rest_framework import viewsets, status
from rest_framework.response import Response

from api.permissions import IsCustomer, IsAdminOrManager
from api.serializers import AddToCartSerializer, CartModelSerializer
from api.services import CartService

class CartViewSet(viewsets.ViewSet):
  cart_service = CartService()

  def get_permissions(self):
    if self.action in ["list_all", "destroy_all"]:
      return [IsAdminOrManager()]

    return [IsCustomer()]

  def active(self, request):
    """
    GET /api/carts
    get the active cart of the authenticated customer,
    an empty unpaid cart if there is none
    """
    cart = self.cart_service.get_active_cart(request.user)
    return Response(CartModelSerializer(cart).data)

  def add_product(self, request):
    """
    POST /api/carts
    add one unit of a product to the active cart
    Body:
    {
      "model": string
    }
    """
    serializer = AddToCartSerializer(data=request.data)
    if not serializer.is_valid():
      return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

    self.cart_service.add_to_cart(request.user, serializer.validated_data["model"])
    return Response(status=status.HTTP_200_OK)

  def checkout(self, request):
    """
    PATCH /api/carts
    pay the active cart
    """
    self.cart_service.checkout_cart(request.user)
    return Response(status=status.HTTP_200_OK)

  def history(self, request):
    """
    GET /api/carts/history
    paid carts of the authenticated customer
    """
    carts = self.cart_service.get_customer_carts(request.user)
    return Response(CartModelSerializer(carts, many=True).data)

  def remove_product(self, request, model=None):
    """
    DELETE /api/carts/products/{model}
    remove one unit of a product from the active cart
    """
    self.cart_service.remove_product_from_cart(request.user, model)
    return Response(status=status.HTTP_200_OK)

  def clear(self, request):
    """
    DELETE /api/carts/current
    remove every product from the active cart
    """
    self.cart_service.clear_cart(request.user)
    return Response(status=status.HTTP_200_OK)

  def destroy_all(self, request):
    """
    DELETE /api/carts
    delete every cart. Admins and managers only.
    """
    self.cart_service.delete_all_carts()
    return Response(status=status.HTTP_200_OK)

  def list_all(self, request):
    """
    GET /api/carts/all
    every cart of every customer, paid or not. Admins and managers only.
    """
    carts = self.cart_service.get_all_carts()
    return Response(CartModelSerializer(carts, many=True).data)
