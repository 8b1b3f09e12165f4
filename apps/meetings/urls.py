from django.urls import path
from . import views

app_name = 'meetings'

urlpatterns = [
    # GET  /api/meetings/   - List meetings
    # POST /api/meetings/   - Create meeting
    path('', views.meetings, name='list'),
    path('<uuid:meeting_id>/', views.delete_meeting, name='delete'),

    # Meeting counter
    path('count/', views.meeting_count, name='count'),
    path('count/increment/', views.increment_meeting_count, name='count-increment'),
]
