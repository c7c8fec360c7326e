"""
Subscriber API — Services Layer
=================================

Service Inventory:
    - SubscriberRepository: find_all / find_by_id / create / save / remove over the subscribers table
    - SubscriberService:    existence check, partial-update merge, failure classification
"""
