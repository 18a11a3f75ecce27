# rental_api/seed.py
import logging
from datetime import datetime, timedelta

from rental_api.db import SessionLocal, init_db
from rental_api.models import (
    Apartment,
    Booking,
    Feedback,
    InstallmentPlan,
    Inventory,
    Payment,
    User,
)

LOG = logging.getLogger(__name__)

def create_dummy_data():
    init_db()
    db = SessionLocal()
    try:
        apartments = [
            Apartment(location="Lakeview", price=1200.0, size=850, features="Balcony, Lake view", available=True),
            Apartment(location="Downtown Loft", price=1850.0, size=640, features="Gym, Doorman", available=True),
            Apartment(location="Riverside", price=950.0, size=700, features="Parking", available=False),
        ]
        LOG.info("아파트 데이터 삽입 중...")
        db.add_all(apartments)
        db.commit()

        users = [
            User(username="admin", email="admin@example.com", password="admin", role="ADMIN"),
            User(username="tenant", email="tenant@example.com", password="tenant", role="USER"),
        ]
        LOG.info("사용자 데이터 삽입 중...")
        db.add_all(users)
        db.commit()

        tenant = users[1]
        booking = Booking(
            user_id=tenant.id,
            apartment_id=apartments[0].id,
            booking_date=datetime.now() - timedelta(days=3),
            status="CONFIRMED",
        )
        db.add(booking)
        db.commit()

        LOG.info("결제/할부 데이터 삽입 중...")
        payment = Payment(
            booking_id=booking.id,
            amount=apartments[0].price,
            payment_date=datetime.now(),
            status="COMPLETED",
        )
        db.add(payment)
        db.commit()
        db.add(InstallmentPlan(payment_id=payment.id, installments=3, monthly_amount=400.0, schedule="MONTHLY"))

        LOG.info("재고/피드백 데이터 삽입 중...")
        for apt, stock in zip(apartments, (3, 1, 0)):
            db.add(Inventory(apartment_id=apt.id, stock=stock, status="AVAILABLE" if stock else "OUT_OF_STOCK"))
        db.add(Feedback(user_id=tenant.id, apartment_id=apartments[0].id, rating=5, comment="Great view"))
        db.commit()
    finally:
        db.close()

    LOG.info("더미 데이터 삽입 완료!")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_dummy_data()
