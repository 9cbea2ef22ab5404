'''
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Thu Aug 07 2025
# SPDX-License-Identifier: MIT
'''

import logging
from html import escape

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from volunteer_matching.config import settings
from volunteer_matching.db import models
from volunteer_matching.services.matching_service import display_name

logger = logging.getLogger(__name__)


class EmailService:
    def __init__(self):
        self.sg = SendGridAPIClient(settings.sendgrid_api_key) if settings.sendgrid_api_key else None
        self.sender_email = settings.mail_sender_email
        self.sender_name = settings.mail_sender_name

    async def send_assignment_notification(
        self,
        volunteer: models.Volunteer,
        event: models.Event,
        match: models.VolunteerMatch,
    ):
        """
        Tells a volunteer they have been assigned to an event.
        """
        subject = f"You're assigned: {event.name}"
        html_content = f"""
        <html>
        <body>
            <p>Hi {escape(display_name(volunteer))},</p>
            <p>You have been assigned to an upcoming event:</p>
            <h3>{escape(event.name)}</h3>
            <ul>
                <li><strong>Date:</strong> {event.event_date.isoformat()}</li>
                <li><strong>Location:</strong> {escape(event.location or "TBA")}</li>
                <li><strong>Urgency:</strong> {escape(event.urgency)}</li>
            </ul>
            <p><strong>Description:</strong> {escape(event.description or "")}</p>
            <p><strong>Notes from the coordinator:</strong> {escape(match.notes or "None")}</p>
            <p>Thank you for volunteering!</p>
            <p>Best regards,</p>
            <p>{escape(self.sender_name)}</p>
        </body>
        </html>
        """
        await self._send_email(volunteer.email, subject, html_content)

    async def send_status_update_notification(
        self,
        volunteer: models.Volunteer,
        event: models.Event,
        match: models.VolunteerMatch,
    ):
        """
        Tells a volunteer that the status of one of their assignments changed.
        """
        subject = f"Assignment update: {event.name} is now {match.status}"
        html_content = f"""
        <html>
        <body>
            <p>Hi {escape(display_name(volunteer))},</p>
            <p>Your assignment for <strong>{escape(event.name)}</strong> on {event.event_date.isoformat()}
            is now <strong>{match.status}</strong>.</p>
            <p>Best regards,</p>
            <p>{escape(self.sender_name)}</p>
        </body>
        </html>
        """
        await self._send_email(volunteer.email, subject, html_content)

    async def _send_email(self, to_email: str, subject: str, html_content: str):
        """
        Internal helper to send an email using SendGrid.
        """
        if self.sg is None:
            logger.warning(f"SendGrid API key not configured, skipping email to {to_email}")
            return

        message = Mail(
            from_email=(self.sender_email, self.sender_name),
            to_emails=to_email,
            subject=subject,
            html_content=html_content
        )
        try:
            response = self.sg.send(message)
            logger.info(f"Email sent to {to_email}. Status Code: {response.status_code}")
        except Exception:
            # Delivery problems must not fail the request that triggered the notification
            logger.exception(f"Error sending email to {to_email}")
